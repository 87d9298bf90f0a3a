from datetime import datetime
from typing import Optional

import attrs


@attrs.define
class Session:
    id: int
    user_id: int
    token: str = attrs.field(repr=False)  # Hide from repr for security
    created_at: Optional[datetime] = None
