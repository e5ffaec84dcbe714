"""Template repository for accessing practice templates.

This module provides the TemplateRepository class for managing the
catalog of reference templates the user can trace. Templates are keyed
by their identifier (e.g. ``'pattern/loops.01'``).

The repository pattern provides:
    - Central storage for all templates
    - A never-failing lookup that falls back to a default template
    - Factory methods for the built-in catalog and for dictionary data

Example usage:
    Basic repository operations::

        from ink_lib.templates import TemplateRepository

        repo = TemplateRepository.with_defaults()
        tpl = repo.by_id('pattern/lines.long.01')
        print(repo.list_ids())

    Loading from JSON-like data::

        data = [{'id': 'glyph/a', 'type': 'glyph',
                 'polyline': [[0, 0], [10, 20]], 'tolerance': 8}]
        repo = TemplateRepository.from_dict(data)
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from ..domain.template import Template
from .catalog import DEFAULT_TEMPLATE, DEMO_TEMPLATES

logger = logging.getLogger(__name__)


class TemplateRepository:
    """Repository for practice templates.

    Attributes:
        _templates: Internal dictionary mapping identifiers to templates,
            in registration order.
        default: Template returned by by_id() for unknown identifiers.

    Example:
        >>> repo = TemplateRepository.with_defaults()
        >>> repo.by_id('no/such/template').id
        'pattern/curves.arc.01'
    """

    def __init__(self, default: Template = DEFAULT_TEMPLATE):
        self._templates: dict[str, Template] = {}
        self.default = default

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: str) -> bool:
        return template_id in self._templates

    def register(self, template: Template) -> None:
        """Register a template, replacing any with the same identifier."""
        self._templates[template.id] = template

    def get(self, template_id: str) -> Optional[Template]:
        """Get a template, or None if not registered."""
        return self._templates.get(template_id)

    def by_id(self, template_id: str) -> Template:
        """Get a template, falling back to the default for unknown ids."""
        template = self._templates.get(template_id)
        if template is None:
            logger.warning("Unknown template %r, using %s", template_id, self.default.id)
            return self.default
        return template

    def list_ids(self) -> List[str]:
        """Identifiers of all registered templates, in registration order."""
        return list(self._templates)

    def all(self) -> List[Template]:
        return list(self._templates.values())

    @classmethod
    def from_templates(cls, templates: Iterable[Template],
                       default: Template = DEFAULT_TEMPLATE) -> TemplateRepository:
        repo = cls(default=default)
        for template in templates:
            repo.register(template)
        return repo

    @classmethod
    def with_defaults(cls) -> TemplateRepository:
        """Repository holding the built-in demo templates."""
        return cls.from_templates(DEMO_TEMPLATES)

    @classmethod
    def from_dict(cls, data: Iterable[Dict]) -> TemplateRepository:
        """Create a repository from a list of template dictionaries.

        The first template becomes the fallback default.
        """
        templates = [Template.from_dict(d) for d in data]
        if not templates:
            return cls()
        return cls.from_templates(templates, default=templates[0])
