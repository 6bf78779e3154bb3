"""The ``rc_api`` service: resource credits for any account."""

from __future__ import annotations

from typing import Any, Dict

from hivemimic.api.services.base import (
    RegisterMethod,
    ServiceHandler,
    _params_object,
    _string_list,
)

MAX_RC = 1000000000
MAX_RC_CREATION_ADJUSTMENT = "1000000000 VESTS"
MANABAR_LAST_UPDATE_TIME = 1550731380


class RcApi(ServiceHandler):
    """Reports every account as holding full resource credits."""

    def find_rc_accounts(self, params: Any) -> Dict[str, Any]:
        """Return one full RC record per name in ``accounts``."""
        args = _params_object(params)
        names = _string_list(args.get("accounts"), "accounts")
        accounts = [
            {
                "account": name,
                "delegated_rc": 0,
                "max_rc": MAX_RC,
                "max_rc_creation_adjustment": MAX_RC_CREATION_ADJUSTMENT,
                "rc_manabar": {
                    "current_mana": MAX_RC,
                    "last_update_time": MANABAR_LAST_UPDATE_TIME,
                },
            }
            for name in names
        ]
        return {"rc_accounts": accounts or None}

    def expose(self, register: RegisterMethod) -> None:
        register("find_rc_accounts", "find_rc_accounts")