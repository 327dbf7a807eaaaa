"""
Shared data types for plangraph.

This module contains dataclasses used across the prd and mrd packages
and the commands to avoid circular imports.
"""

from dataclasses import dataclass

from plangraph.lib.constants import SEVERITY_ERROR


@dataclass
class Finding:
    """A single validation finding.

    `field` is a path into the document, e.g. "personas[2].id" or
    "solution.selected_solution_id".
    """
    field: str
    message: str
    severity: str = SEVERITY_ERROR  # "error" or "warning"

    @property
    def is_error(self) -> bool:
        return self.severity == SEVERITY_ERROR

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}
