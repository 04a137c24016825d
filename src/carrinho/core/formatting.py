"""Formatação de valores e resumo textual do carrinho."""
from __future__ import annotations
from kink import di
from .settings import Settings
from ..ports.interfaces import CartSnapshot

def _settings() -> Settings:
    return di[Settings] if Settings in di else Settings()

def format_price(amount: float, settings: Settings | None = None) -> str:
    """Ex.: 70 -> "$70.00" (símbolo e casas decimais vêm das Settings)."""
    s = settings or _settings()
    return f"{s.currency_symbol}{amount:.{s.price_decimals}f}"

def out_of_stock_message(title: str | None = None) -> str:
    """Texto de aviso exibido quando inc/add_one retorna OUT_OF_STOCK."""
    return f'Não há mais estoque para "{title or "este produto"}".'

def render_summary(snapshot: CartSnapshot, settings: Settings | None = None) -> str:
    """Retorna string compacta do carrinho (id • título • qty x preço • subtotal) e total."""
    s = settings or _settings()
    if not snapshot.items:
        return "Seu carrinho está vazio."
    lines = [
        f"{it.id} • {it.title} • {it.qty} x {format_price(it.price, s)} • {format_price(it.price * it.qty, s)}"
        for it in snapshot.items
    ]
    lines.append(f"Total: {format_price(snapshot.total_price, s)}")
    return "\n".join(lines)
