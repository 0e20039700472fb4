"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by colourkit.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the command files at runtime.
"""

# PyInstaller hidden imports — keep this list in sync with command modules
import colourkit.commands.all as _all  # noqa: F401
import colourkit.commands.convert as _convert  # noqa: F401
import colourkit.commands.distance as _distance  # noqa: F401
import colourkit.commands.gray as _gray  # noqa: F401
import colourkit.commands.swatch as _swatch  # noqa: F401
