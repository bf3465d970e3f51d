"""Scheme auto-discovery and registration.

Scans colour_scheme/schemes/ with pkgutil.iter_modules for modules that
define a `scheme` object of type Scheme. Collects them into a dict keyed
by name.
"""

import importlib
import pkgutil

from colour_scheme.core.types import Scheme

_registry: dict[str, Scheme] = {}


def discover() -> dict[str, Scheme]:
    """Import all scheme modules and return the registry."""
    if _registry:
        return _registry

    import colour_scheme.schemes as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    for modname in found_modules:
        module = importlib.import_module(f'colour_scheme.schemes.{modname}')
        scheme = getattr(module, 'scheme', None)
        if isinstance(scheme, Scheme):
            _registry[scheme.name] = scheme

    return _registry


def get(name: str) -> Scheme:
    """Get a scheme by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown scheme: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_schemes() -> dict[str, Scheme]:
    """Return all registered schemes."""
    return discover()
