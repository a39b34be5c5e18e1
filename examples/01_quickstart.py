#!/usr/bin/env python3
"""Example: tweakgraph quickstart

Minimal working example: declare a resource, configure it with tweaks,
and render the tree to JSON.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install tweakgraph
"""
from __future__ import annotations

import tweakgraph as tg

QUEUE = "AWS::SQS::Queue"


class Queue(tg.Resource):
    def __init__(self, scope, id, linkables=None):  # noqa: A002
        super().__init__(scope, id, QUEUE)
        self.make_linkable_as(QUEUE)
        self.add_property("QueueName", tg.ScalarProperty())
        self.add_property("Tags", tg.CollectionProperty())
        self.link(linkables)


def main() -> None:
    print(f"tweakgraph version: {tg.__version__}")

    # Step 1: Build a tree; tweaks apply to every node advertising their tag
    root = tg.Root()
    Queue(root, "Jobs", [
        tg.scalar_tweak(QUEUE, "QueueName", "jobs"),
        tg.collection_tweak(QUEUE, "Tags", {"Key": "Team", "Value": "infra"}),
    ])

    # Step 2: Tweaks linked later reach every queue under the scope
    Queue(root, "Retries")
    root.link([tg.collection_tweak(QUEUE, "Tags", {"Key": "Env", "Value": "dev"})])

    # Step 3: Render
    print(tg.render(root))

    # Step 4: Scalars accept one tweak only
    try:
        root.link([tg.scalar_tweak(QUEUE, "QueueName", "other")])
    except tg.AlreadySetError as exc:
        print(f"Rejected: {exc}")


if __name__ == "__main__":
    main()
