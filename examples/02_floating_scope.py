#!/usr/bin/env python3
"""Example: floating constructs in tweakgraph

Declare a bucket policy before its bucket exists and let the bucket adopt
it, then compare the six demo styles.

Usage:
    python examples/02_floating_scope.py
"""
from __future__ import annotations

from tweakgraph.construct import Root, floating
from tweakgraph.demo import APPS
from tweakgraph.library import Bucket, BucketPolicy, PolicyStatement
from tweakgraph.render import DocumentSerializer, render_all


def main() -> None:
    root = Root()
    policy = BucketPolicy(floating(), "Policy", linkables=[
        BucketPolicy.automatic_bucket_name(),
        PolicyStatement(actions=["s3:GetObject"], principals=["*"]),
    ])
    print(f"Before linking: {policy} (floating={policy.is_floating})")

    Bucket(root, "Logs", linkables=[Bucket.bucket_name("logs"), policy])
    print(f"After linking:  {policy} (floating={policy.is_floating})")
    print(DocumentSerializer().render(root, "yaml"))

    documents = {name: render_all(app.build(None)) for name, app in APPS.items()}
    baseline = next(iter(documents.values()))
    for name, document in documents.items():
        print(f"{name:<24} {'same' if document == baseline else 'DIFFERENT'}")


if __name__ == "__main__":
    main()
