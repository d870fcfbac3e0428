"""Secret data model shared with the secret store."""

from dataclasses import dataclass, field

SECRET_TYPE_BASIC_AUTH = "kubernetes.io/basic-auth"


@dataclass
class Secret:
    """A namespaced key/value object holding byte values."""

    namespace: str
    name: str
    data: dict[str, bytes] = field(default_factory=dict)
    type: str = "Opaque"
    owner: str | None = None  # "<kind>/<name>" of the descriptor that owns it

    def get_text(self, key: str) -> str:
        """Decode a data field as UTF-8, returning "" when absent."""
        return self.data.get(key, b"").decode("utf-8")

    def __repr__(self) -> str:
        return (
            f"Secret(namespace={self.namespace!r}, name={self.name!r}, "
            f"keys={sorted(self.data)}, type={self.type!r})"
        )
