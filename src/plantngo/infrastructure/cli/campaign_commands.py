"""CLI commands for quests and promotions."""

from __future__ import annotations

import click

from plantngo.application.promotions import (
    AddPromotionHandler,
    DeletePromotionHandler,
    ShowPromotionsHandler,
    UpdatePromotionHandler,
)
from plantngo.application.quests import (
    AddQuestHandler,
    DeleteQuestHandler,
    RefreshQuestsHandler,
    ShowQuestsHandler,
)
from plantngo.domain.exceptions import DomainException
from plantngo.infrastructure.bootstrap import (
    merchant_repository,
    product_repository,
    promotion_repository,
    quest_repository,
)
from plantngo.infrastructure.cli._common import DATE_FORMATS, as_utc, echo_table

# --- Quests ---------------------------------------------------------------------


@click.command("add")
@click.option("--title", required=True)
@click.option("--description", default="")
@click.option("--points", required=True, type=int, help="Green points awarded.")
@click.option("--count", "target_count", required=True, type=int, help="Times to complete.")
@click.option("--start", required=True, type=click.DateTime(DATE_FORMATS), help="UTC start.")
@click.option("--end", required=True, type=click.DateTime(DATE_FORMATS), help="UTC end.")
def quest_add(title, description, points, target_count, start, end) -> None:
    """Create a quest."""
    handler = AddQuestHandler(quest_repository())

    try:
        quest = handler.handle(
            title, description, points, target_count, as_utc(start), as_utc(end)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    state = "active" if quest.is_active else "inactive"
    click.echo(f"Quest #{quest.id} '{quest.title}' created ({state}).")


@click.command("list")
@click.option("--active", "which", flag_value="active", help="Only active quests.")
@click.option("--inactive", "which", flag_value="inactive", help="Only inactive quests.")
def quest_list(which: str | None) -> None:
    """List quests."""
    handler = ShowQuestsHandler(quest_repository())
    if which == "active":
        quests = handler.active()
    elif which == "inactive":
        quests = handler.inactive()
    else:
        quests = handler.all()

    if not quests:
        click.echo("No quests found.")
        return
    echo_table(
        [("ID", "<6"), ("Title", "<24"), ("Points", ">7"), ("Active", ">7")],
        [[q.id, q.title, q.points, "yes" if q.is_active else "no"] for q in quests],
    )


@click.command("delete")
@click.option("--id", "quest_id", required=True, type=int)
def quest_delete(quest_id: int) -> None:
    """Delete a quest."""
    try:
        DeleteQuestHandler(quest_repository()).handle(quest_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Quest #{quest_id} deleted.")


@click.command("refresh")
@click.option("--id", "quest_id", default=None, type=int, help="Refresh one quest only.")
def quest_refresh(quest_id: int | None) -> None:
    """Recompute active/inactive status from the current time."""
    handler = RefreshQuestsHandler(quest_repository())

    try:
        if quest_id is not None:
            quest = handler.refresh_one(quest_id)
            state = "active" if quest.is_active else "inactive"
            click.echo(f"Quest #{quest.id} is {state}.")
        else:
            changed = handler.refresh_all()
            click.echo(f"Quests refreshed ({changed} changed).")
    except DomainException as exc:
        raise click.ClickException(str(exc))


# --- Promotions -----------------------------------------------------------------


def _parse_ids(raw: str | None) -> list[int]:
    if not raw:
        return []
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(f"Invalid product ID list '{raw}'.")


@click.command("add")
@click.option("--merchant", required=True, help="Merchant username.")
@click.option("--code", "promocode", required=True, help="Promocode.")
@click.option("--value", "promo_value", required=True, help="Discount value.")
@click.option("--start", required=True, type=click.DateTime(DATE_FORMATS))
@click.option("--end", required=True, type=click.DateTime(DATE_FORMATS))
@click.option("--products", default=None, help="Product IDs as '1,2,3'.")
@click.option("--url", default=None)
def promotion_add(merchant, promocode, promo_value, start, end, products, url) -> None:
    """Create a promotion for a merchant."""
    handler = AddPromotionHandler(
        promotion_repo=promotion_repository(),
        merchant_repo=merchant_repository(),
        product_repo=product_repository(),
    )

    try:
        promotion = handler.handle(
            merchant,
            promocode,
            promo_value,
            as_utc(start),
            as_utc(end),
            product_ids=_parse_ids(products),
            url=url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Promotion #{promotion.id} '{promotion.promocode}' created.")


@click.command("list")
@click.option("--merchant", default=None, help="Only this merchant's promotions.")
@click.option("--active", is_flag=True, default=False, help="Only running promotions.")
def promotion_list(merchant: str | None, active: bool) -> None:
    """List promotions."""
    handler = ShowPromotionsHandler(promotion_repository())
    if active:
        promotions = [
            p for p in handler.active()
            if merchant is None or p.merchant_username == merchant
        ]
    elif merchant:
        promotions = handler.by_merchant(merchant)
    else:
        promotions = handler.all()

    if not promotions:
        click.echo("No promotions found.")
        return
    echo_table(
        [("ID", "<6"), ("Code", "<16"), ("Merchant", "<15"), ("Value", ">8"), ("Ends", "<25")],
        [
            [p.id, p.promocode, p.merchant_username, p.promo_value, p.window.end.isoformat()]
            for p in promotions
        ],
    )


@click.command("update")
@click.option("--id", "promotion_id", required=True, type=int)
@click.option("--value", "promo_value", default=None)
@click.option("--start", default=None, type=click.DateTime(DATE_FORMATS))
@click.option("--end", default=None, type=click.DateTime(DATE_FORMATS))
@click.option("--url", default=None)
def promotion_update(promotion_id, promo_value, start, end, url) -> None:
    """Change a promotion's value, window or URL."""
    try:
        UpdatePromotionHandler(promotion_repository()).handle(
            promotion_id,
            promo_value=promo_value,
            start=as_utc(start),
            end=as_utc(end),
            url=url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Promotion #{promotion_id} updated.")


@click.command("delete")
@click.option("--id", "promotion_id", required=True, type=int)
def promotion_delete(promotion_id: int) -> None:
    """Delete a promotion."""
    try:
        DeletePromotionHandler(promotion_repository()).handle(promotion_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Promotion #{promotion_id} deleted.")
