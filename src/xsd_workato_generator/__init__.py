"""Generate Mustache templates and Workato field schemas from XSD files."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
