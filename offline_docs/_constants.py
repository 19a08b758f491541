"""Common literal values used across offline_docs.

These constants keep template names, placeholder messages, and url prefixes
centralized so the resolver, assembler, and tests can import the same values
without drifting. Intended for internal use within the offline_docs package.

Examples
--------
>>> from offline_docs import _constants
>>> _constants.NOT_FOUND_TEMPLATE.format(url="/en/missing.md")
'Content not found for: /en/missing.md'
>>> _constants.PAGE_TEMPLATE_NAME
'offline_page.jinja'
"""

LOCALE_PREFIX = "/en/"
EXTERNAL_SCHEMES = ("http://", "https://")

NOT_FOUND_TEMPLATE = "Content not found for: {url}"
LOAD_ERROR_TEMPLATE = "Error loading content for: {url}"
SUCCESS_MESSAGE = "Documentation generated successfully: %s"

PAGE_TEMPLATE_NAME = "offline_page.jinja"
SIDEBAR_TEMPLATE_NAME = "sidebar.jinja"
CONTENT_SECTION_TEMPLATE_NAME = "content_section.jinja"
