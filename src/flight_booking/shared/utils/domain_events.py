from dataclasses import fields, is_dataclass

from aws_lambda_powertools import Logger

from flight_booking.shared.domain import AggregateRoot


def _to_log_value(value: object) -> object:
    if value is None:
        return None
    if isinstance(value, (tuple, list, frozenset, set)):
        return [str(v) for v in value]
    return str(value)


def log_domain_events(logger: Logger, aggregate: AggregateRoot) -> None:
    """集約に記録されたドメインイベントを取り出して INFO ログに出力する"""
    for event in aggregate.flush_domain_events():
        payload = (
            {f.name: _to_log_value(getattr(event, f.name)) for f in fields(event)}
            if is_dataclass(event)
            else {}
        )
        logger.info(type(event).__name__, extra={"domain_event": payload})
