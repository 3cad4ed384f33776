#!/usr/bin/env python
# Encoding: utf-8
# See: <http://docs.python.org/distutils/introduction.html>
import os
from setuptools import setup

NAME        = "nestedcss"
WEBSITE     = "http://www.github.com/sebastien/nestedcss"
SUMMARY     = "CSS from nested Python dictionaries."
DESCRIPTION = """\
Converts nested Python dictionaries of selectors, at-rules and properties into
a canonical CSS object or CSS text.
"""
LONG_DESCRIPTION  = None
if os.path.exists("README.md") and os.popen("which pandoc").read():
	LONG_DESCRIPTION = os.popen("pandoc -f markdown -t rst README.md").read()

VERSION = eval([_.rsplit("=",1)[1] for _ in open("src/nestedcss/__init__.py").readlines() if _.startswith("VERSION")][0])

setup(
	name             = NAME,
	version          = VERSION,
	description      = DESCRIPTION,
	long_description = LONG_DESCRIPTION,
	author           = "Sébastien Pierre",
	author_email     = "sebastien.pierre@gmail.com",
	url              =  WEBSITE,
	download_url     =  WEBSITE + "/%s-%s.tar.gz" % (NAME.lower(), VERSION) ,
	keywords         = ["css", "pre-processor", "css-in-python",],
	install_requires = [],
	extras_require   = {"test":["pytest",]},
	python_requires  = ">=3.8",
	packages         = ["nestedcss"],
	package_dir      = {"nestedcss":"src/nestedcss"},
	license          = "License :: OSI Approved :: BSD License",
	# SEE: https://pypi.python.org/pypi?%3Aaction=list_classifiers
	classifiers      = [
		"Programming Language :: Python",
		"Programming Language :: Python :: 3",
		"Development Status :: 4 - Beta",
		"Natural Language :: English",
		"Intended Audience :: Developers",
		"Operating System :: OS Independent",
		"Topic :: Utilities"
	],
)

# EOF - vim: ts=4 sw=4 noet
