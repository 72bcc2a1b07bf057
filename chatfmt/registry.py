"""Renderer lookup.

Each module in chatfmt/renderers/ contributes the `renderer` object it
defines. The CLI finds a renderer's docs by its module name, so a
renderer whose name differs from its module is rejected at load time.
"""

import importlib
import pkgutil
from functools import cache

import chatfmt.renderers
from chatfmt.core.types import Renderer


def _load(modname: str) -> Renderer | None:
    module = importlib.import_module(f'{chatfmt.renderers.__name__}.{modname}')
    rend = getattr(module, 'renderer', None)
    if not isinstance(rend, Renderer):
        return None
    if rend.name != modname:
        raise ValueError(f'Renderer in chatfmt.renderers.{modname} is named {rend.name!r}; expected {modname!r}')
    return rend


@cache
def all_renderers() -> dict[str, Renderer]:
    """Renderers keyed by name, loaded once per process."""
    found = {}
    for info in pkgutil.iter_modules(chatfmt.renderers.__path__):
        if info.name.startswith('_'):
            continue
        rend = _load(info.name)
        if rend is not None:
            found[rend.name] = rend
    return found


def get(name: str) -> Renderer:
    """Get a renderer by name."""
    renderers = all_renderers()
    if name not in renderers:
        raise KeyError(f'Unknown renderer: {name}. Available: {", ".join(sorted(renderers))}')
    return renderers[name]
