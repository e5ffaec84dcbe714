"""Practice templates and the repository that serves them.

The module exports:
    CURVES_ARC_01, LINES_LONG_01, LOOPS_01: Built-in demo templates.
    DEMO_TEMPLATES: All built-in templates.
    TemplateRepository: Catalog lookup by identifier.

Example usage::

    from ink_lib.templates import TemplateRepository

    repo = TemplateRepository.with_defaults()
    template = repo.by_id('pattern/loops.01')
"""

from .catalog import CURVES_ARC_01, DEFAULT_TEMPLATE, DEMO_TEMPLATES, LINES_LONG_01, LOOPS_01
from .repository import TemplateRepository

__all__ = [
    'CURVES_ARC_01', 'LINES_LONG_01', 'LOOPS_01',
    'DEMO_TEMPLATES', 'DEFAULT_TEMPLATE',
    'TemplateRepository',
]
