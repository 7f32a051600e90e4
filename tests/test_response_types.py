import json
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from pydantic import ValidationError  # noqa: E402

from fimfiction.errors import (  # noqa: E402
    MissingRequiredAttribute,
    TypeMismatch,
    UnknownEnumValue,
    UnknownResourceType,
)
from fimfiction.resources.follows_types import Follow  # noqa: E402
from fimfiction.resources.reference_types import ResourceReference  # noqa: E402
from fimfiction.resources.response_types import (  # noqa: E402
    ApiResponse,
    StoryResponse,
    decode_response,
)
from fimfiction.resources.stories_types import Story, StoryTag  # noqa: E402
from fimfiction.resources.users_types import User  # noqa: E402

import payloads  # noqa: E402


def story_response() -> dict:
    return payloads.response(
        payloads.story("9"),
        [
            payloads.user("5"),
            payloads.story_tag("1"),
            payloads.story_tag("14"),
        ],
    )


class DecodeResponseTests(unittest.TestCase):
    def test_untyped_data(self):
        response = decode_response(story_response())
        self.assertIsInstance(response.data, Story)
        self.assertEqual(response.uri, "/api/v2/stories/9")
        self.assertEqual(response.method, "GET")
        self.assertEqual(response.debug, {"duration": "12.5ms"})
        self.assertEqual(
            [type(resource) for resource in response.included],
            [User, StoryTag, StoryTag],
        )

    def test_typed_data(self):
        response = decode_response(story_response(), Story)
        self.assertIsInstance(response, StoryResponse)
        self.assertIsInstance(response.data, Story)

    def test_typed_data_wrong_kind(self):
        with self.assertRaises(TypeMismatch) as ctx:
            decode_response(payloads.response(payloads.user("5")), Story)
        self.assertEqual(ctx.exception.path, ("data", "type"))

    def test_list_data(self):
        raw = payloads.response([payloads.follow("1"), payloads.follow("2")], [payloads.user("6")])
        response = decode_response(json.dumps(raw).encode("utf-8"), list[Follow])
        self.assertEqual([follow.id for follow in response.data], [1, 2])

    def test_included_and_debug_default_empty(self):
        raw = story_response()
        del raw["included"]
        del raw["debug"]
        response = decode_response(raw)
        self.assertEqual(response.included, [])
        self.assertEqual(response.debug, {})

    def test_uri_required(self):
        raw = story_response()
        del raw["uri"]
        with self.assertRaises(MissingRequiredAttribute) as ctx:
            decode_response(raw)
        self.assertEqual(ctx.exception.path, ("uri",))

    def test_relationship_presence_depends_on_position(self):
        top = decode_response(payloads.response(payloads.story("9")))
        nested = decode_response(
            payloads.response(
                payloads.user("5"),
                [payloads.story("9", with_relationships=False)],
            )
        )
        self.assertIsNotNone(top.data.relationships)
        self.assertIsNone(nested.included[0].relationships)
        self.assertEqual(top.data.attributes, nested.included[0].attributes)

    def test_unknown_included_type_fails(self):
        raw = story_response()
        raw["included"].append({"id": "1", "type": "comment", "attributes": {}})
        with self.assertRaises(UnknownResourceType) as ctx:
            decode_response(raw)
        self.assertEqual(ctx.exception.path, ("included", 3))
        self.assertEqual(ctx.exception.raw_value, "comment")

    def test_included_error_names_resource(self):
        raw = story_response()
        del raw["included"][0]["attributes"]["avatar"]["512"]
        with self.assertRaises(MissingRequiredAttribute) as ctx:
            decode_response(raw)
        error = ctx.exception
        self.assertEqual(error.path, ("included", 0, "attributes", "avatar", "512"))
        self.assertEqual((error.kind, error.resource_id), ("user", "5"))

    def test_data_error_names_resource(self):
        raw = story_response()
        raw["data"]["attributes"]["content_rating"] = "adult"
        with self.assertRaises(UnknownEnumValue) as ctx:
            decode_response(raw, Story)
        self.assertEqual(ctx.exception.path, ("data", "attributes", "content_rating"))
        self.assertEqual((ctx.exception.kind, ctx.exception.resource_id), ("story", "9"))

    def test_duplicates_are_not_an_error(self):
        raw = story_response()
        raw["included"].append(payloads.user("5"))
        response = decode_response(raw)
        self.assertEqual(len(response.included), 4)


class ResolutionTests(unittest.TestCase):
    def test_resolve_relationships(self):
        response = decode_response(story_response(), Story)
        author = response.resolve(response.data.relationships.author.data)
        self.assertIsInstance(author, User)
        self.assertEqual(author.attributes.name, "Twilight Sparkle")
        tags = [response.resolve(ref) for ref in response.data.relationships.tags.data]
        self.assertEqual([tag.id for tag in tags], [1, 14])

    def test_resolve_miss(self):
        response = decode_response(story_response())
        self.assertIsNone(response.resolve(ResourceReference(type="user", id="99")))

    def test_index_last_wins(self):
        raw = story_response()
        renamed = payloads.user("5")
        renamed["attributes"]["name"] = "Spike"
        raw["included"].append(renamed)
        response = decode_response(raw)
        with self.assertLogs("fimfiction.resources.union", level="WARNING"):
            index = response.index()
        self.assertEqual(index[ResourceReference(type="user", id="5")].attributes.name, "Spike")
        self.assertEqual(response.resolve(ResourceReference(type="user", id="5")).attributes.name, "Spike")


class ApiResponseModelTests(unittest.TestCase):
    def test_frozen(self):
        response = decode_response(story_response())
        with self.assertRaises(ValidationError):
            response.uri = "/elsewhere"  # type: ignore[misc]

    def test_generic_parametrization(self):
        self.assertIs(ApiResponse[Story], StoryResponse)
