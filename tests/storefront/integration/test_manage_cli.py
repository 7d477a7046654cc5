"""Tests for the management CLI commands."""

import manage
import pytest


@pytest.fixture()
def cli(storefront, monkeypatch):
    monkeypatch.setattr(manage, "_open_storefront", lambda: storefront)
    return manage.main


class TestManageCli:
    def test_list(self, cli, capsys):
        cli(["list"])

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "bread  Pão de Lenha  [Pães]  R$ 15,00"
        assert out[1] == "spice  Tempero da Roça  [Temperos]"
        assert out[2].strip() == "spice-L  (L)  R$ 8,00"

    def test_categories(self, cli, capsys):
        cli(["categories"])

        assert capsys.readouterr().out.splitlines() == ["Pães:", "  • Pão de Lenha", "Temperos:", "  • Tempero da Roça"]

    def test_adjust_then_summary(self, cli, capsys, storefront):
        cli(["adjust", "bread", "2"])
        cli(["adjust", "spice-L", "1"])
        cli(["summary"])

        out = capsys.readouterr().out
        assert "bread: 2" in out
        assert out.rstrip().endswith("Total: R$ 38,00")
        assert storefront.cart.quantity_of("bread") == 2

    def test_empty_summary(self, cli, capsys):
        cli(["summary"])
        assert capsys.readouterr().out.strip() == "Cart is empty."

    def test_reset_catalog(self, cli, storefront):
        cli(["reset-catalog"])
        assert storefront.catalog.get("bread") is None

    def test_write_failure_exits_with_3(self, cli, blob_store, capsys):
        blob_store.configure(fail_writes=True)

        with pytest.raises(SystemExit) as exc:
            cli(["adjust", "bread", "1"])

        assert exc.value.code == 3
        assert "not saved" in capsys.readouterr().err
