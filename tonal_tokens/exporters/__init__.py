"""Auto-discovery of exporter modules.

Every .py file in this package that defines an `exporter` object is
auto-registered by tonal_tokens.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the exporter files at runtime.
"""

# PyInstaller hidden imports. Keep this list in sync with exporter modules
import tonal_tokens.exporters.audit as _audit  # noqa: F401
import tonal_tokens.exporters.css as _css  # noqa: F401
import tonal_tokens.exporters.figma as _figma  # noqa: F401
import tonal_tokens.exporters.json_doc as _json_doc  # noqa: F401
import tonal_tokens.exporters.material as _material  # noqa: F401
import tonal_tokens.exporters.scss as _scss  # noqa: F401
import tonal_tokens.exporters.tailwind as _tailwind  # noqa: F401
