"""
Taste of Aloha Backend — Maintenance Script Tests
==================================================
"""

from unittest.mock import AsyncMock, patch

from scripts import add_menu_item, remove_menu_item


class TestRemoveMenuItem:

    def test_requires_a_name(self, capsys):
        assert remove_menu_item.main([]) == 1
        assert "Provide a menu item name" in capsys.readouterr().err

    def test_blank_name_rejected(self):
        assert remove_menu_item.main(["  "]) == 1

    def test_reports_removed_count(self, capsys):
        with patch.object(remove_menu_item, "remove_items", AsyncMock(return_value=2)):
            assert remove_menu_item.main(["Garlic Shrimp"]) == 0

        assert 'Removed 2 item(s) named "Garlic Shrimp".' in capsys.readouterr().out

    def test_failure_returns_non_zero(self):
        failing = AsyncMock(side_effect=RuntimeError("connection refused"))
        with patch.object(remove_menu_item, "remove_items", failing):
            assert remove_menu_item.main(["Garlic Shrimp"]) == 1


class TestAddMenuItemArgs:

    def test_defaults(self):
        args = add_menu_item.parse_args([])

        assert args.name == "Spam Musubi"
        assert args.price == 5.99
        assert args.category == "Specials"

    def test_positional_name_and_price(self):
        args = add_menu_item.parse_args(["Kalua Pig", "14.5", "--category", "Plates"])

        assert args.name == "Kalua Pig"
        assert args.price == 14.5
        assert args.category == "Plates"
