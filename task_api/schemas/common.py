from pydantic import BaseModel
from typing import ClassVar, List, Optional, Tuple


def is_blank(value) -> bool:
    # Whitespace counts as content; only absent or empty values are blank.
    return value is None or value == ""


class Payload(BaseModel):
    """Request body whose fields all parse as optional.

    Presence rules are checked explicitly with :meth:`missing_or_invalid`
    so a missing field becomes a 400 naming the field, not a parse error.

    ``required`` fields must be present and non-blank on create, and may
    not be blanked on update.  Fields listed in ``nullable`` accept an
    explicit ``null``; every other field rejects it.
    """

    required: ClassVar[Tuple[str, ...]] = ()
    nullable: ClassVar[Tuple[str, ...]] = ()

    class Config:
        populate_by_name = True

    def missing_or_invalid(self, partial: bool = False) -> List[str]:
        """Return the JSON names of offending fields, in declaration order."""
        fields = type(self).model_fields
        sent = self.model_fields_set
        bad = []
        for name, info in fields.items():
            if partial and name not in sent:
                continue
            value = getattr(self, name)
            if name in self.required:
                if is_blank(value):
                    bad.append(info.alias or name)
            elif value is None and name in sent and name not in self.nullable:
                bad.append(info.alias or name)
        return bad


class MessageResponse(BaseModel):
    message: str


class CreatedResponse(MessageResponse):
    id: str


class ErrorResponse(MessageResponse):
    fields: Optional[List[str]] = None
