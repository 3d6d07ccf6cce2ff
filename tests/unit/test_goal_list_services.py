"""Tests for the distraction, sticky note, resource and time block services."""

import pytest

from onegoal.exceptions import ValidationError
from onegoal.services.distraction_service import DistractionService
from onegoal.services.resource_service import ResourceService
from onegoal.services.sticky_note_service import StickyNoteService
from onegoal.services.time_block_service import TimeBlockService
from onegoal.models.util_types import ResourceType, StickyNoteColor
from tests.conftest import CREATED


class TestDistractionService:
    def test_add_uses_defaults(self, store, user_id, stored_goal):
        """New distractions start with no count or patterns."""
        item = DistractionService(store).add_distraction_item(user_id, "g1", " News sites ")

        assert item["title"] == "News sites"
        assert item["triggerPatterns"] == []
        assert item["count"] == 0
        assert item["description"] is None
        assert stored_goal()["notToDoList"][-1] == item

    def test_update_count_touches_updated_at(self, store, user_id, stored_goal):
        """Test updating the count."""
        updated = DistractionService(store).update_distraction_item(user_id, "g1", "d1", {"count": 10})

        stored = stored_goal()["notToDoList"][0]
        assert stored["count"] == 10
        assert stored["title"] == "Social media"
        assert updated["updatedAt"] > CREATED

    def test_delete(self, store, user_id, stored_goal):
        """Test deleting a distraction."""
        assert DistractionService(store).delete_distraction_item(user_id, "g1", "d1") is True
        assert stored_goal()["notToDoList"] == []


class TestStickyNoteService:
    def test_add_strips_and_stores_enum_value(self, store, user_id, stored_goal):
        """Text is stripped and the color stored as its value."""
        note = StickyNoteService(store).add_sticky_note(
            user_id, "g1", " Plan ", " Outline ", StickyNoteColor.GREEN
        )

        assert note["title"] == "Plan"
        assert note["content"] == "Outline"
        assert note["color"] == "green"
        assert stored_goal()["stickyNotes"][-1]["color"] == "green"

    def test_color_defaults_to_yellow(self, store, user_id):
        """Notes are yellow by default."""
        note = StickyNoteService(store).add_sticky_note(user_id, "g1", "Plan", "")
        assert note["color"] == "yellow"

    def test_invalid_color(self, store, user_id):
        """Unknown colors are rejected."""
        with pytest.raises(ValidationError):
            StickyNoteService(store).add_sticky_note(user_id, "g1", "Plan", "", "neon")

    def test_update_and_delete(self, store, user_id, stored_goal):
        """Test updating and deleting a note."""
        service = StickyNoteService(store)
        service.update_sticky_note(user_id, "g1", "n1", {"content": "More"})
        assert stored_goal()["stickyNotes"][0]["content"] == "More"

        assert service.delete_sticky_note(user_id, "g1", "n1") is True
        assert stored_goal()["stickyNotes"] == []


class TestResourceService:
    def test_add(self, store, user_id, stored_goal):
        """Test adding a resource."""
        resource = ResourceService(store).add_resource(
            user_id, "g1", "https://example.com", "Guide", type=ResourceType.ARTICLE
        )

        assert resource["type"] == "article"
        assert resource["description"] is None
        assert stored_goal()["resources"] == [resource]

    def test_missing_url_is_invalid(self, store, user_id):
        """Resources need a URL."""
        with pytest.raises(ValidationError) as exc:
            ResourceService(store).add_resource(user_id, "g1", "", "Guide")
        assert exc.value.message == "New resource data is invalid."

    def test_update_and_delete(self, store, user_id, stored_goal):
        """Test updating and deleting a resource."""
        service = ResourceService(store)
        resource = service.add_resource(user_id, "g1", "https://example.com", "Guide")

        service.update_resource(user_id, "g1", resource["id"], {"title": "Better guide"})
        assert stored_goal()["resources"][0]["title"] == "Better guide"

        assert service.delete_resource(user_id, "g1", resource["id"]) is True
        assert stored_goal()["resources"] == []


class TestTimeBlockService:
    def test_add(self, store, user_id, stored_goal):
        """Test adding a time block."""
        block = TimeBlockService(store).add_time_block(user_id, "g1", " Review ", "14:00", "15:30", "red")

        assert block["label"] == "Review"
        assert block["completed"] is False
        assert stored_goal()["timeBlocks"][-1] == block

    def test_bad_time_format(self, store, user_id):
        """Times must be HH:MM."""
        with pytest.raises(ValidationError):
            TimeBlockService(store).add_time_block(user_id, "g1", "Review", "2pm", "15:30", "red")

    def test_completion_maintains_completed_at(self, store, user_id, stored_goal):
        """Completing and reopening a block maintains completedAt."""
        service = TimeBlockService(store)

        done = service.update_time_block(user_id, "g1", "tb1", {"completed": True})
        assert done["completedAt"] is not None

        service.update_time_block(user_id, "g1", "tb1", {"completed": False})
        assert stored_goal()["timeBlocks"][0]["completedAt"] is None

    def test_delete(self, store, user_id, stored_goal):
        """Test deleting a time block."""
        assert TimeBlockService(store).delete_time_block(user_id, "g1", "tb1") is True
        assert stored_goal()["timeBlocks"] == []
