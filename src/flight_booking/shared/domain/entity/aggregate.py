from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティ（乗客など）の変更は必ず集約ルートを経由
    - トランザクション境界 = 集約境界
    - 状態変更はドメインイベントとして記録し、ハンドラ側で取り出す
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list[object] = []

    def add_domain_event(self, event: object) -> None:
        """ドメインイベントを追加する"""
        self._domain_events.append(event)

    def flush_domain_events(self) -> list[object]:
        """記録済みのドメインイベントを返し、内部のリストを空にする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events
