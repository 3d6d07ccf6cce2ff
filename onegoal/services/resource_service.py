"""Saved resources (links, videos, documents) for a goal."""

from typing import Any, Dict, Optional, Union

from onegoal.apis.DocumentStore import DocumentStore
from onegoal.documents.lists import GoalListMutator, RESOURCES
from onegoal.models.util_types import ResourceType


class ResourceService:
    def __init__(self, store: Optional[DocumentStore] = None):
        self.mutator = GoalListMutator(RESOURCES, store)

    def add_resource(
        self,
        user_id: str,
        goal_id: str,
        url: str,
        title: str,
        description: Optional[str] = None,
        type: Union[ResourceType, str] = ResourceType.OTHER,
    ) -> Dict[str, Any]:
        return self.mutator.add(user_id, goal_id, {
            "url": url,
            "title": title,
            "description": description,
            "type": type,
        })

    def update_resource(
        self, user_id: str, goal_id: str, resource_id: str, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        return self.mutator.update(user_id, goal_id, resource_id, updates)

    def delete_resource(self, user_id: str, goal_id: str, resource_id: str) -> bool:
        return self.mutator.delete(user_id, goal_id, resource_id)
