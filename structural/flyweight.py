"""
享元模式示範：大量對象共享少量草圖。
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from rich.console import Console

logger = logging.getLogger(__name__)


class ObjectDraftType(Enum):
    TYPE_ONE = "typeOne"
    TYPE_TWO = "typeTwo"
    TYPE_THREE = "typeThree"
    TYPE_FOUR = "typeFour"


DRAFT_COLORS = {
    ObjectDraftType.TYPE_ONE: "black",
    ObjectDraftType.TYPE_TWO: "red",
    ObjectDraftType.TYPE_THREE: "blue",
    ObjectDraftType.TYPE_FOUR: "clear",
}


class ObjectDraft:
    """共享的內部狀態。"""

    def __init__(self, color: str, draft_type: ObjectDraftType):
        self.color = color
        self.draft_type = draft_type

    def __str__(self) -> str:
        return f"MemoryAddress: {hex(id(self))}, color: {self.color}, objectType: {self.draft_type.value}"


class ObjectDraftFactory:
    """每種類型只建立一個草圖。"""

    def __init__(self):
        self._drafts: Dict[ObjectDraftType, ObjectDraft] = {}

    def create_object_draft(self, draft_type: ObjectDraftType) -> ObjectDraft:
        draft = self._drafts.get(draft_type)
        if draft is None:
            draft = ObjectDraft(DRAFT_COLORS[draft_type], draft_type)
            self._drafts[draft_type] = draft
            logger.debug(f"Amount of sprites has changed to {len(self._drafts)}")
        return draft

    @property
    def draft_count(self) -> int:
        return len(self._drafts)


@dataclass
class SceneObject:
    """外部狀態（id）加上共享的草圖。"""

    id: int
    draft: ObjectDraft

    def __str__(self) -> str:
        return f"Object id: {self.id}, draft: {self.draft}"


def populate(factory: ObjectDraftFactory, count: int, rng: Optional[random.Random] = None) -> List[SceneObject]:
    rng = rng or random.Random()
    types = list(ObjectDraftType)
    return [
        SceneObject(id=object_id, draft=factory.create_object_draft(rng.choice(types)))
        for object_id in range(count)
    ]


def run_demo(console: Console, count: int = 20, rng: Optional[random.Random] = None) -> None:
    factory = ObjectDraftFactory()
    for scene_object in populate(factory, count, rng):
        console.print(str(scene_object))
    console.print(f"\n{count} 個對象共享 {factory.draft_count} 個草圖")
