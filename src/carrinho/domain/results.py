"""Resultado das operações do carrinho (substitui tags de string soltas)."""
from enum import Enum

class CartResult(str, Enum):
    OK = "ok"
    OUT_OF_STOCK = "out_of_stock"
    NOT_FOUND = "not_found"
