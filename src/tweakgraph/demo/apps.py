"""Six ways of declaring the same bucket-with-policy application.

Every app builds a bucket named ``MyBucket`` tagged ``CostCenter=1234``
with a policy granting ``s3:GetObject`` to ``*``.  They differ only in how
the pieces find each other, and all must render to the same document
(``tweakgraph check`` verifies this).
"""
from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from tweakgraph.config import Settings
from tweakgraph.construct.linkable import Linkable
from tweakgraph.construct.tree import Construct, Root, floating
from tweakgraph.library import (
    Bucket,
    BucketPolicy,
    BucketPolicyProps,
    BucketProps,
    BucketTag,
    PolicyStatement,
)


@dataclass(frozen=True)
class DemoApp:
    name: str
    description: str
    build: Callable[[Settings | None], Root]


def _statement(**kwargs: object) -> PolicyStatement:
    return PolicyStatement(actions=["s3:GetObject"], principals=["*"], **kwargs)  # type: ignore[arg-type]


def constructor_props(settings: Settings | None = None) -> Root:
    root = Root(settings)
    bucket = Bucket(
        root,
        "Bucket",
        BucketProps(bucket_name="MyBucket", tags=(BucketTag("CostCenter", "1234"),)),
    )
    BucketPolicy(bucket, "BucketPolicy", BucketPolicyProps(bucket=bucket), [_statement()])
    return root


def floating_policy(settings: Settings | None = None) -> Root:
    root = Root(settings)
    Bucket(root, "Bucket", linkables=[
        Bucket.bucket_name("MyBucket"),
        Bucket.tag("CostCenter", "1234"),
        BucketPolicy(floating(settings), "BucketPolicy", linkables=[
            BucketPolicy.automatic_bucket_name(),
            _statement(),
        ]),
    ])
    return root


def explicit_policy(settings: Settings | None = None) -> Root:
    root = Root(settings)
    bucket = Bucket(root, "Bucket", linkables=[
        Bucket.bucket_name("MyBucket"),
        Bucket.tag("CostCenter", "1234"),
    ])
    BucketPolicy(bucket, "BucketPolicy", BucketPolicyProps(bucket=bucket), [_statement()])
    return root


def _explicit(root: Root) -> None:
    bucket = Bucket(root, "Bucket", linkables=[
        Bucket.bucket_name("MyBucket"),
        Bucket.tag("CostCenter", "1234"),
    ])
    policy = BucketPolicy(bucket, "BucketPolicy", BucketPolicyProps(bucket=bucket))
    _statement(policy_document=policy.policy_document)


def fully_explicit(settings: Settings | None = None) -> Root:
    return Root.build(_explicit, settings)


def fancy_bucket(
    scope: Construct, id: str, tweaks: Iterable[Linkable | None] | None = None  # noqa: A002
) -> Bucket:
    """A bucket that always carries a policy, and accepts more tweaks."""
    return Bucket(scope, id, linkables=[
        Bucket.bucket_name("MyBucket"),
        Bucket.tag("CostCenter", "1234"),
        BucketPolicy(floating(scope.settings), "BucketPolicy", linkables=[
            BucketPolicy.automatic_bucket_name(),
        ]),
        *(tweaks or ()),
    ])


def fancy_bucket_tweaked(settings: Settings | None = None) -> Root:
    return Root.build(lambda root: fancy_bucket(root, "Bucket", [_statement()]), settings)


def fancy_bucket_late_link(settings: Settings | None = None) -> Root:
    return Root.build(lambda root: fancy_bucket(root, "Bucket").link([_statement()]), settings)


APPS: dict[str, DemoApp] = {
    app.name: app
    for app in (
        DemoApp("constructor-props", "Everything passed as constructor props", constructor_props),
        DemoApp("floating-policy", "Tweaks plus a floating, adopted policy", floating_policy),
        DemoApp("explicit-policy", "Tweaks plus a policy given its bucket", explicit_policy),
        DemoApp("fully-explicit", "Statement attached directly to the document", fully_explicit),
        DemoApp("fancy-bucket", "Reusable bucket function, statement as tweak", fancy_bucket_tweaked),
        DemoApp("fancy-bucket-late-link", "Reusable bucket, statement linked later", fancy_bucket_late_link),
    )
}
