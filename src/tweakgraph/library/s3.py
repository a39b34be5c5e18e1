"""S3 bucket and bucket-policy resources.

Both resources accept their settings three ways: as constructor props, as
tweaks passed in ``linkables``, or as tweaks linked later.  All three
render identically.

Usage
-----
::

    root = Root()
    Bucket(root, "Bucket", linkables=[
        Bucket.bucket_name("MyBucket"),
        Bucket.tag("CostCenter", "1234"),
        BucketPolicy(floating(), "BucketPolicy", linkables=[
            BucketPolicy.automatic_bucket_name(),
        ]),
    ])
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from tweakgraph.construct.linkable import Linkable
from tweakgraph.construct.tree import Construct
from tweakgraph.errors import TypeMismatchError
from tweakgraph.library.iam import PolicyDocument
from tweakgraph.plugins.registry import resource_types
from tweakgraph.properties.model import CollectionProperty, DerivedProperty, ScalarProperty
from tweakgraph.properties.observable import UNSET
from tweakgraph.resource.resource import Resource
from tweakgraph.tweaks.tweaks import CollectionTweak, LinkingTweak, ScalarTweak

BUCKET = "AWS::S3::Bucket"
BUCKET_POLICY = "AWS::S3::BucketPolicy"


# ---------------------------------------------------------------------------
# Bucket
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BucketTag:
    key: str
    value: str


@dataclass(frozen=True)
class BucketProps:
    bucket_name: str | None = None
    tags: tuple[BucketTag, ...] = ()


@resource_types.register(BUCKET)
class Bucket(Resource):
    """An S3 bucket.

    Properties: ``BucketName``, ``LoggingConfiguration`` (scalars) and
    ``Tags`` (collection).  :attr:`arn` follows ``BucketName``.
    """

    @staticmethod
    def bucket_name(name: str) -> ScalarTweak:
        return ScalarTweak(BUCKET, "BucketName", name)

    @staticmethod
    def tag(key: str, value: str) -> CollectionTweak:
        return CollectionTweak(BUCKET, "Tags", {"Key": key, "Value": value})

    @staticmethod
    def logging_configuration(
        destination_bucket_name: Any, log_file_prefix: str | None = None
    ) -> ScalarTweak:
        config: dict[str, Any] = {"DestinationBucketName": destination_bucket_name}
        if log_file_prefix is not None:
            config["LogFilePrefix"] = log_file_prefix
        return ScalarTweak(BUCKET, "LoggingConfiguration", config)

    def __init__(
        self,
        scope: Construct,
        id: str,  # noqa: A002
        props: BucketProps | None = None,
        linkables: Iterable[Linkable | None] | None = None,
    ) -> None:
        super().__init__(scope, id, BUCKET)
        props = props or BucketProps()

        self.make_linkable_as(BUCKET)
        name = self.add_property("BucketName", ScalarProperty())
        self.add_property("LoggingConfiguration", ScalarProperty())
        self.add_property("Tags", CollectionProperty())
        self.arn = DerivedProperty(name, lambda n: f"arn:aws:s3:::{n}")

        self.link([
            Bucket.bucket_name(props.bucket_name) if props.bucket_name is not None else None,
            *(Bucket.tag(t.key, t.value) for t in props.tags),
            *(linkables or ()),
        ])


# ---------------------------------------------------------------------------
# BucketPolicy
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BucketPolicyProps:
    bucket_name: str | None = None
    bucket: Bucket | None = None


def _link_bucket_automatically(policy: Resource) -> None:
    if not isinstance(policy, BucketPolicy):
        raise TypeMismatchError("automatic_bucket_name()", "BucketPolicy", str(policy))
    policy.make_linkable_to([BUCKET], policy.bucket.set)


@resource_types.register(BUCKET_POLICY)
class BucketPolicy(Resource):
    """A policy attached to a bucket.

    ``Bucket`` is filled from ``props.bucket_name``, from a
    ``bucket_name``/``for_bucket`` tweak, or from the :attr:`bucket`
    relationship once it is linked (explicitly through ``props.bucket``
    or through :meth:`automatic_bucket_name`).
    """

    @staticmethod
    def bucket_name(name: str) -> ScalarTweak:
        return ScalarTweak(BUCKET_POLICY, "Bucket", name)

    @staticmethod
    def for_bucket(bucket: Bucket) -> ScalarTweak:
        return ScalarTweak(BUCKET_POLICY, "Bucket", bucket.ref)

    @staticmethod
    def automatic_bucket_name() -> LinkingTweak:
        """Take the bucket from whichever bucket this policy is linked to."""
        return LinkingTweak(BUCKET_POLICY, _link_bucket_automatically)

    def __init__(
        self,
        scope: Construct,
        id: str,  # noqa: A002
        props: BucketPolicyProps | None = None,
        linkables: Iterable[Linkable | None] | None = None,
    ) -> None:
        super().__init__(scope, id, BUCKET_POLICY)
        props = props or BucketPolicyProps()

        self.make_linkable_as(BUCKET_POLICY)
        self.add_property(
            "Bucket",
            ScalarProperty(props.bucket_name if props.bucket_name is not None else UNSET),
        )
        self.policy_document = PolicyDocument(self, "PolicyDocument")
        self.add_property("PolicyDocument", ScalarProperty(self.policy_document))

        # No target tags: filled explicitly or by automatic_bucket_name().
        self.bucket = self.add_link_relationship((), props.bucket)
        self.bucket.add_observer(lambda b: BucketPolicy.for_bucket(b).link_to(self))

        self.link(linkables)
