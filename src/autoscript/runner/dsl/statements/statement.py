"""Statement base class and the ``statementType`` registry."""

from typing import Any, ClassVar

from ..errors import LoadError
from ..model.fields import ensure_object, parse_list, require_field


class Statement:
    """An instruction in a function body.

    Statements never produce a value. Control flow statements own nested
    blocks; every other statement evaluates expressions for their effect.

    Each concrete statement registers itself under its JSON discriminator::

        @dataclass
        class ReturnStatement(Statement, statement_type="return"):
            ...

    The set of discriminators is closed: :meth:`from_dict` rejects any
    ``statementType`` no subclass registered.
    """

    _registry: ClassVar[dict[str, type["Statement"]]] = {}
    STATEMENT_TYPE: ClassVar[str] = ""

    def __init_subclass__(cls, statement_type: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if statement_type is not None:
            cls.STATEMENT_TYPE = statement_type
            Statement._registry[statement_type] = cls

    @property
    def statement_type(self) -> str:
        return self.STATEMENT_TYPE

    @classmethod
    def from_dict(cls, data: Any) -> "Statement":
        """Build the statement variant named by ``data["statementType"]``.

        Raises:
            LoadError: If the discriminator is missing or unknown, or a
                required field is missing or malformed
        """
        data = ensure_object(data, "statement")
        statement_type = data.get("statementType")
        if statement_type is None:
            raise LoadError("statement is missing required field 'statementType'")

        statement_class = Statement._registry.get(statement_type)
        if statement_class is None:
            raise LoadError(f"Unknown statement type: {statement_type}")
        return statement_class._load(data)

    @classmethod
    def list_from(cls, data: dict[str, Any], key: str, owner: str) -> list["Statement"]:
        """Parse the required statement block held in ``data[key]``."""
        return parse_list(require_field(data, key, owner, list), cls.from_dict, key)

    @classmethod
    def _load(cls, data: dict[str, Any]) -> "Statement":
        raise NotImplementedError

    def _dump(self) -> dict[str, Any]:
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the document form, discriminator first."""
        return {"statementType": self.statement_type, **self._dump()}
