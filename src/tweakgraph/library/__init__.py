"""Resource definitions built on the core construction API.

Importing this package registers its resource types with
:data:`tweakgraph.plugins.resource_types`.
"""
from __future__ import annotations

from tweakgraph.library.iam import POLICY_DOCUMENT, PolicyDocument, PolicyStatement
from tweakgraph.library.s3 import (
    BUCKET,
    BUCKET_POLICY,
    Bucket,
    BucketPolicy,
    BucketPolicyProps,
    BucketProps,
    BucketTag,
)

__all__ = [
    "BUCKET",
    "BUCKET_POLICY",
    "POLICY_DOCUMENT",
    "Bucket",
    "BucketProps",
    "BucketTag",
    "BucketPolicy",
    "BucketPolicyProps",
    "PolicyDocument",
    "PolicyStatement",
]
