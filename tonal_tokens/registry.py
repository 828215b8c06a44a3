"""Exporter auto-discovery and registration.

Scans tonal_tokens/exporters/ for modules that define an `exporter` object
of type Exporter. Collects them into a dict keyed by name.

Handles both normal Python (pkgutil.iter_modules) and frozen binaries
(where iter_modules returns nothing, so it falls back to explicit imports from
exporters/__init__.py).
"""

import importlib
import pkgutil
from types import ModuleType

from tonal_tokens.core.types import Exporter

_registry: dict[str, Exporter] = {}
_modules: dict[str, ModuleType] = {}

# Known exporter module names, fallback for frozen binaries
_EXPORTER_MODULES = [
    'audit',
    'css',
    'figma',
    'json_doc',
    'material',
    'scss',
    'tailwind',
]


def discover() -> dict[str, Exporter]:
    """Import all exporter modules and return the registry."""
    if _registry:
        return _registry

    import tonal_tokens.exporters as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]

    if not found_modules:
        found_modules = _EXPORTER_MODULES

    for modname in found_modules:
        module = importlib.import_module(f'tonal_tokens.exporters.{modname}')
        exp = getattr(module, 'exporter', None)
        if isinstance(exp, Exporter):
            _registry[exp.name] = exp
            _modules[exp.name] = module

    return _registry


def get(name: str) -> Exporter:
    """Get an exporter by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown exporter: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_exporters() -> dict[str, Exporter]:
    """Return all registered exporters."""
    return discover()


def module_for(name: str) -> ModuleType:
    """The module an exporter lives in (its docstring is the exporter's documentation)."""
    get(name)
    return _modules[name]
