"""IAM policy documents and statements."""
from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from tweakgraph.construct.tree import Construct
from tweakgraph.errors import TypeMismatchError

POLICY_DOCUMENT = "iam:PolicyDocument"


class PolicyDocument(Construct):
    """A construct that collects statements and renders as a policy."""

    VERSION = "2012-10-17"

    def __init__(self, scope: Construct, id: str) -> None:  # noqa: A002
        super().__init__(scope, id)
        self.make_linkable_as(POLICY_DOCUMENT)
        self._statements: list[PolicyStatement] = []

    @property
    def statements(self) -> tuple["PolicyStatement", ...]:
        return tuple(self._statements)

    def add_statement(self, statement: "PolicyStatement") -> None:
        self._statements.append(statement)

    def render(self) -> dict[str, Any]:
        return {
            "Version": self.VERSION,
            "Statement": [s.render() for s in self._statements],
        }


class PolicyStatement:
    """A free-standing linkable that attaches to policy documents.

    Parameters
    ----------
    actions, resources, principals:
        Rendered as lists, or ``None`` when omitted.
    effect:
        ``"Allow"`` or ``"Deny"``.
    policy_document:
        Attach to this document immediately instead of waiting for a
        link traversal.
    """

    link_targets: tuple[str, ...] = (POLICY_DOCUMENT,)

    def __init__(
        self,
        *,
        actions: Sequence[str] | None = None,
        effect: str = "Allow",
        resources: Sequence[str] | None = None,
        principals: Sequence[str] | None = None,
        policy_document: PolicyDocument | None = None,
    ) -> None:
        self.actions = list(actions) if actions is not None else None
        self.effect = effect
        self.resources = list(resources) if resources is not None else None
        self.principals = list(principals) if principals is not None else None
        if policy_document is not None:
            policy_document.add_statement(self)

    def link_to(self, target: Construct) -> None:
        if not isinstance(target, PolicyDocument):
            raise TypeMismatchError(repr(self), "PolicyDocument", str(target))
        target.add_statement(self)

    def render(self) -> dict[str, Any]:
        return {
            "Effect": self.effect,
            "Action": self.actions,
            "Resource": self.resources,
            "Principal": self.principals,
        }

    def __repr__(self) -> str:
        return (
            f"PolicyStatement(effect={self.effect!r}, actions={self.actions!r}, "
            f"resources={self.resources!r}, principals={self.principals!r})"
        )
