"""Bootstrap do container de DI (kink) para o carrinho da sessão."""
from kink import Container, di
from .settings import Settings
from .logging import configure_logging, get_logger, set_session_id
from .catalog import load_catalog, InMemoryCatalog
from ..domain.services.cart_service import CartStore

def bootstrap_di(container: Container = di, settings: Settings | None = None, session_id: str | None = None) -> Container:
    settings = settings or Settings()
    configure_logging(settings.log_level)
    container[Settings] = settings
    container["session_id"] = set_session_id(session_id)
    container["logger"] = get_logger("carrinho")
    container["catalog"] = InMemoryCatalog(load_catalog(settings.catalog_path))
    # Um CartStore por container (sessão), criado na primeira resolução
    container[CartStore] = lambda c: CartStore()
    return container
