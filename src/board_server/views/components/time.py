from datetime import datetime

from htpy import BaseElement, time as time_


def render_time(value: datetime) -> BaseElement:
    return time_(datetime=value.isoformat())[value.strftime("%Y-%m-%d %H:%M:%S UTC")]
