"""Regex patterns for url pattern parsing."""

import re

# Pattern parsing expressions
scheme_pattern = re.compile(r"^(?P<scheme>[a-zA-Z][a-zA-Z0-9+.\-]*)://")
variable_pattern = re.compile(r"^\{(?P<name>[^{}]+)\}$")
