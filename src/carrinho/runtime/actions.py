
"""Ações nomeadas do carrinho: registro de ações tipadas (Pydantic) e execução."""
from __future__ import annotations
from typing import Callable, Dict, Any, Type
from pydantic import BaseModel
import json

from ..ports.interfaces import CatalogItem
from ..domain.services.cart_service import CartStore

class ActionSpec(BaseModel):
    name: str
    description: str
    args_schema: Type[BaseModel]
    func: Callable[[BaseModel], Any]

class ActionRegistry:
    """Registro de ações disponíveis sobre um carrinho."""
    def __init__(self):
        self._actions: Dict[str, ActionSpec] = {}

    def register(self, spec: ActionSpec) -> None:
        if spec.name in self._actions:
            raise ValueError(f"ação duplicada: {spec.name}")
        self._actions[spec.name] = spec

    def list_specs(self) -> list[ActionSpec]:
        return list(self._actions.values())

    def execute(self, name: str, arguments: dict | None = None) -> Any:
        if name not in self._actions:
            raise KeyError(name)
        model = self._actions[name].args_schema.model_validate(arguments or {})
        return self._actions[name].func(model)

    def execute_json(self, name: str, arguments_json: str) -> str:
        """Executa ação recebendo `arguments` como JSON string e retorna JSON string do resultado."""
        args = json.loads(arguments_json or "{}")
        result = self.execute(name, args)
        return json.dumps({"result": result}, ensure_ascii=False)

class AddOneArgs(BaseModel):
    item: CatalogItem

class ItemIdArgs(BaseModel):
    id: int

class NoArgs(BaseModel):
    pass

def build_cart_actions(store: CartStore) -> ActionRegistry:
    """Registra as ações ADD_ONE/INC/DEC/REMOVE/CLEAR ligadas a `store`."""
    def _clear(_: NoArgs) -> None:
        store.clear()

    registry = ActionRegistry()
    registry.register(ActionSpec(name="add_one", description="Adiciona 1 unidade do produto", args_schema=AddOneArgs, func=lambda a: store.add_one(a.item)))
    registry.register(ActionSpec(name="inc", description="Incrementa quantidade respeitando estoque", args_schema=ItemIdArgs, func=lambda a: store.inc(a.id)))
    registry.register(ActionSpec(name="dec", description="Decrementa quantidade; remove ao chegar a zero", args_schema=ItemIdArgs, func=lambda a: store.dec(a.id)))
    registry.register(ActionSpec(name="remove", description="Remove o item do carrinho", args_schema=ItemIdArgs, func=lambda a: store.remove(a.id)))
    registry.register(ActionSpec(name="clear", description="Esvazia o carrinho", args_schema=NoArgs, func=_clear))
    return registry
