#!/usr/bin/env python3
# encoding=utf8 ---------------------------------------------------------------
# Project           : NestedCSS
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 03-Oct-2026
# Last modification : 17-Oct-2026
# -----------------------------------------------------------------------------

from .command   import toObject, toCSS, formatOnly, writeCSS
from .model     import Options, NestedCSSError, NestingConflict, CallerValueError

VERSION    = "0.1.0"
LICENSE    = "http://ffctn.com/doc/licenses/bsd"

__doc__ = """
Converts nested Python dictionaries describing CSS rules into CSS. Keys are
selectors (which can be comma-separated, use `&` to refer to their parent and
`@media` to be hoisted) or property names, values are strings, numbers, lists
or functions taking the conversion options.
"""

# EOF
