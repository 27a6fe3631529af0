"""Pilot tests for the Textual shell."""

from decimal import Decimal

import pytest

from foodorder.bill_modal import BillModal
from foodorder.combo_modal import ComboModal
from foodorder.order_app import FoodOrderApp


@pytest.mark.asyncio
async def test_enter_adds_highlighted_item(session):
    app = FoodOrderApp(session=session, printer_enabled=False)
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()

        assert session.get_total() == Decimal("180")
        assert app.status_message == "ITEMS ADDED"


@pytest.mark.asyncio
async def test_unavailable_item_offers_combos(session):
    app = FoodOrderApp(session=session, printer_enabled=False)
    async with app.run_test() as pilot:
        # Main Course: Pasta (unavailable) is first.
        await pilot.press("right")
        await pilot.press("enter")
        await pilot.pause()
        assert isinstance(app.screen, ComboModal)
        assert session.get_total() == 0

        await pilot.press("enter")
        await pilot.pause()

        assert not isinstance(app.screen, ComboModal)
        assert session.get_total() == Decimal("330")
        assert app.status_message == "COMBO ADDED"


@pytest.mark.asyncio
async def test_combo_picker_can_be_cancelled(session):
    app = FoodOrderApp(session=session, printer_enabled=False)
    async with app.run_test() as pilot:
        await pilot.press("c")
        await pilot.pause()
        assert isinstance(app.screen, ComboModal)

        await pilot.press("escape")
        await pilot.pause()
        assert not isinstance(app.screen, ComboModal)
        assert session.get_cart_snapshot().is_empty


@pytest.mark.asyncio
async def test_checkout_shows_bill_and_writes_log(session):
    app = FoodOrderApp(session=session, printer_enabled=False)
    async with app.run_test() as pilot:
        await pilot.press("enter", "down", "enter")
        await pilot.press("ctrl+s")
        await pilot.pause()

        assert isinstance(app.screen, BillModal)
        assert app.screen.result.bill.subtotal == Decimal("300")
        assert session.get_cart_snapshot().is_empty
        assert list(session.order_logger.log_dir.glob("orders_*.txt"))

        await pilot.press("enter")
        await pilot.pause()
        assert not isinstance(app.screen, BillModal)
        assert app.status_message == "COMPLETED"


@pytest.mark.asyncio
async def test_checkout_empty_cart_is_rejected(session):
    app = FoodOrderApp(session=session, printer_enabled=False)
    async with app.run_test() as pilot:
        await pilot.press("ctrl+s")
        await pilot.pause()

        assert not isinstance(app.screen, BillModal)
        assert app.status_message.startswith("Your cart is empty")
        assert not session.order_logger.log_dir.exists()


@pytest.mark.asyncio
async def test_remove_and_reset(session):
    app = FoodOrderApp(session=session, printer_enabled=False)
    async with app.run_test() as pilot:
        await pilot.press("enter", "enter", "down", "enter")
        await pilot.pause()
        assert session.get_total() == Decimal("480")

        await pilot.press("j", "d")
        await pilot.pause()
        assert session.get_total() == Decimal("300")

        await pilot.press("ctrl+r")
        await pilot.pause()
        assert session.get_cart_snapshot().is_empty
        assert app.status_message == "READY"


@pytest.mark.asyncio
async def test_added_row_is_highlighted_for_removal(session):
    app = FoodOrderApp(session=session, printer_enabled=False)
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()
        assert app.cart_selected_index == 0

        await pilot.press("d")
        await pilot.pause()

        assert session.get_total() == 0
        assert session.get_cart_snapshot().is_empty
        assert app.cart_selected_index is None


@pytest.mark.asyncio
async def test_cart_cursor_follows_last_added_item(session):
    app = FoodOrderApp(session=session, printer_enabled=False)
    async with app.run_test() as pilot:
        await pilot.press("enter", "down", "enter", "up", "enter")
        await pilot.pause()
        # Paneer Tikka is the first cart row and was added last.
        assert app.cart_selected_index == 0

        await pilot.press("d")
        await pilot.pause()
        assert session.get_total() == Decimal("300")


@pytest.mark.asyncio
async def test_checkout_shows_processing_before_billing(session):
    app = FoodOrderApp(session=session, printer_enabled=False)
    shown: list[str] = []
    async with app.run_test() as pilot:
        await pilot.press("enter")
        await pilot.pause()

        refresh_status = app._refresh_status

        def recording_refresh() -> None:
            shown.append(app.status_message)
            refresh_status()

        app._refresh_status = recording_refresh
        await pilot.press("ctrl+s")
        await pilot.pause()

    assert shown[0] == "PROCESSING"
    assert shown[-1] == "COMPLETED"
