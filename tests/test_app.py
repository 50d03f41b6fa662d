from decimal import Decimal

from storefront.app import Storefront, storage_from_url
from storefront.catalog import MemoryCatalog, seed_products
from storefront.checkout import Stage
from storefront.config import Settings
from storefront.confirmation import ConfirmationView, render
from storefront.storage import MemoryStorage, SQLAlchemyStorage
from storefront.stores import CartLine

from tests.conftest import ok


def test_settings_defaults():
    settings = Settings.from_env({})

    assert settings.database_url == "sqlite:///storefront.db"
    assert settings.log_level == "INFO"
    assert settings.recheck_stock is False


def test_settings_from_env():
    settings = Settings.from_env({
        "STOREFRONT_DATABASE_URL": "memory://",
        "STOREFRONT_LOG_LEVEL": "debug",
        "STOREFRONT_RECHECK_STOCK": "yes",
    })

    assert settings.in_memory
    assert settings.log_level == "DEBUG"
    assert settings.recheck_stock is True


def test_storage_from_url(tmp_path):
    assert isinstance(storage_from_url("memory://"), MemoryStorage)

    durable = storage_from_url(f"sqlite:///{tmp_path / 'app.db'}")
    assert isinstance(durable, SQLAlchemyStorage)
    durable.close()


def test_end_to_end(contact_data, address_data, payment_data):
    shop = Storefront.create(Settings(database_url="memory://"))
    headphones = shop.catalog.get_product("p1")

    ok(shop.cart.add_item(CartLine.of(headphones, 2)))
    ok(shop.favorites.toggle("p1"))
    assert shop.search.search("headphones") == (headphones,)
    assert shop.rating("p1") == 4.5

    flow = shop.checkout()
    ok(flow.submit_contact(contact_data))
    ok(flow.submit_address(address_data | {"shipping_method": "standard"}))
    assert ok(flow.submit_payment(payment_data)) is Stage.PLACED

    view = render(shop.inbox.take())
    assert isinstance(view, ConfirmationView)
    assert view.total == Decimal("409.98")
    assert shop.cart.lines == ()
    assert shop.favorites.has_item("p1")
    shop.close()


def test_sessions_share_durable_state(tmp_path):
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'shop.db'}")
    catalog = MemoryCatalog(seed_products())

    first = Storefront.create(settings, catalog)
    first.favorites.add_item("p2")
    first.close()

    second = Storefront.create(settings, catalog)
    assert second.favorites.items == ("p2",)
    second.close()


def test_empty_catalog_is_kept():
    shop = Storefront.create(Settings(database_url="memory://"), MemoryCatalog(()))

    assert len(shop.catalog) == 0
    assert shop.search.browse() == []
