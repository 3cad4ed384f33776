# encoding=utf8 ---------------------------------------------------------------
# Project           : NestedCSS
# -----------------------------------------------------------------------------
# Author            : FFunction
# License           : BSD License
# -----------------------------------------------------------------------------
# Creation date     : 03-Oct-2026
# Last modification : 17-Oct-2026
# -----------------------------------------------------------------------------

import logging, sys
from  .model     import Options, NestedCSSError
from  .processor import RuleProcessor
from  .writer    import CSSWriter

__doc__ = """
The entry points of the library: converting rules to a CSS object, to CSS
text, or formatting an existing CSS object.
"""

log = logging.getLogger("nestedcss")

def toObject( rules, options=None, **kwargs ):
	"""Converts the given rule tree to its canonical CSS object, a dictionary
	of selectors to properties and nested blocks."""
	try:
		return RuleProcessor(Options.Ensure(options, **kwargs)).process(rules)
	except NestedCSSError as e:
		log.error("Could not convert rules: {0}".format(e))
		raise

def toCSS( rules, options=None, **kwargs ):
	"""Converts the given rule tree to CSS text."""
	options = Options.Ensure(options, **kwargs)
	return formatOnly(toObject(rules, options), options)

def formatOnly( node, options=None, **kwargs ):
	"""Formats an already converted CSS object as CSS text."""
	options = Options.Ensure(options, **kwargs)
	return CSSWriter.Format(node, options.indent)

def writeCSS( rules, output=sys.stdout, options=None, **kwargs ):
	"""Converts the given rule tree and writes the CSS text to `output`,
	which can be a text or a binary stream."""
	options = Options.Ensure(options, **kwargs)
	return CSSWriter(output=output, indent=options.indent).write(toObject(rules, options))

# EOF - vim: ts=4 sw=4 noet
