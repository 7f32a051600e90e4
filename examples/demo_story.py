"""CLI demo that fetches a story and resolves its author and tags.

Run with the virtual environment activated::

    python examples/demo_story.py 9

``FIMFICTION_CLIENT_ID`` and ``FIMFICTION_CLIENT_SECRET`` must hold the
credentials of a registered application.
"""

import logging
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from fimfiction import Application

logging.basicConfig(level=logging.INFO)


def main() -> None:
    story_id = int(sys.argv[1]) if len(sys.argv) > 1 else 9
    app = Application.from_env()

    response = app.stories.get(story_id)
    if response is None:
        print("Request failed.")
        return

    story = response.data
    print(f"{story.attributes.title} [{story.attributes.completion_status.value}]")
    print(f"  {story.attributes.num_words} words, {story.attributes.num_chapters} chapters")

    author = response.resolve(story.relationships.author.data)
    print(f"  by {author.attributes.name if author else 'an author not included in the response'}")

    for reference in story.relationships.tags.data:
        tag = response.resolve(reference)
        if tag is not None:
            print(f"  - {tag.attributes.name} ({tag.attributes.type.value})")


if __name__ == "__main__":
    main()
