"""The ``condenser_api`` service, answering with canned chain data."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Any, Dict, List, Optional, Union

from hivemimic.api.services.base import (
    RegisterMethod,
    ServiceHandler,
    _int_param,
    _params_object,
    _string_list,
    load_mock_data,
)

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNTS_MOCK_PATH = "mockdata/condenser_api_get_accounts.mock.json"

_GLOBAL_PROPERTIES: Dict[str, Any] = {
    "head_block_number": 100,
    "head_block_id": "1234567890",
    "time": "2023-10-01T00:00:00",
    "current_witness": "test",
    "total_pow": "0",
    "num_pow_witnesses": 0,
    "virtual_supply": "100.000 HIVE",
    "current_supply": "100.000 HIVE",
    "confidential_supply": "0.000 HIVE",
    "current_hbd_supply": "100.000 HBD",
    "confidential_hbd_supply": "0.000 HBD",
    "total_vesting_fund_hive": "100.000 HIVE",
    "total_vesting_shares": "100.000 HIVE",
    "total_reward_fund_hive": "100.000 HIVE",
    "total_reward_shares2": "0",
    "pending_rewarded_vesting_shares": "0.000 HIVE",
    "pending_rewarded_vesting_hive": "0.000 HIVE",
    "hbd_interest_rate": 0,
    "hbd_print_rate": 10000,
    "maximum_block_size": 1000000,
    "current_aslot": 0,
    "recent_slots_filled": "0",
    "participation_count": 0,
    "last_irreversible_block_num": 100,
    "vote_power_reserve_rate": 40,
}

_MEDIAN_PRICE: Dict[str, str] = {"base": "100.000 SBD", "quote": "100.000 HIVE"}

_REWARD_FUND: Dict[str, Any] = {
    "id": 1,
    "name": "test",
    "reward_balance": "100.000 HIVE",
    "recent_claims": "1000",
    "last_update": "2023-10-01T00:00:00",
    "content_constant": "1000",
    "percent_curation_rewards": 50,
    "percent_content_rewards": 50,
    "author_reward_curve": "linear",
    "curation_reward_curve": "quadratic",
}

_EXPOSED = (
    "get_block",
    "get_dynamic_global_properties",
    "get_current_median_history_price",
    "get_reward_fund",
    "get_withdraw_routes",
    "get_open_orders",
    "get_conversion_requests",
    "get_collateralized_conversion_requests",
    "get_accounts",
    "list_proposals",
)


def _account_requests(params: Any) -> List[List[str]]:
    if params is None:
        return []
    if not isinstance(params, list):
        raise ValueError("params must be a list of account name lists")
    return [_string_list(item, "account request") for item in params]


def _any_list(params: Any) -> list:
    if params is None:
        return []
    if not isinstance(params, list):
        raise ValueError("params must be a list")
    return params


class Condenser(ServiceHandler):
    """Legacy condenser queries, answered with fixed or mock data."""

    def __init__(
        self, accounts_mock_path: Union[str, PathLike] = DEFAULT_ACCOUNTS_MOCK_PATH
    ) -> None:
        self.accounts_mock_path = accounts_mock_path

    def get_block(self, params: Any) -> Dict[str, int]:
        """Return ``a + b + 1`` and ``a * b`` for the integers ``a`` and ``b``."""
        args = _params_object(params)
        a = _int_param(args, "a")
        b = _int_param(args, "b")
        return {"sum": a + b + 1, "product": a * b}

    def get_accounts(self, params: Any) -> Optional[List[Any]]:
        """Return the mock records of the first name in each request; unknown ones are skipped."""
        requests = _account_requests(params)
        data = load_mock_data(self.accounts_mock_path)
        found = []
        for names in requests:
            if not names:
                raise ValueError("account request holds no name")
            name = names[0]
            if name not in data:
                logger.info("No account found. name=%s", name)
                continue
            found.append(data[name])
        return found or None

    def get_dynamic_global_properties(self, params: Any) -> Dict[str, Any]:
        _string_list(params)
        return dict(_GLOBAL_PROPERTIES)

    def get_current_median_history_price(self, params: Any) -> Dict[str, str]:
        _string_list(params)
        return dict(_MEDIAN_PRICE)

    def get_reward_fund(self, params: Any) -> Dict[str, Any]:
        _string_list(params)
        return dict(_REWARD_FUND)

    def get_withdraw_routes(self, params: Any) -> None:
        """Withdraw routes are not tracked; the result is always null."""
        return None

    def get_open_orders(self, params: Any) -> None:
        """Open orders are not tracked; the result is always null."""
        _string_list(params)
        return None

    def get_conversion_requests(self, params: Any) -> List[Any]:
        """HBD to HIVE conversions; always empty."""
        _string_list(params)
        return []

    def get_collateralized_conversion_requests(self, params: Any) -> List[Any]:
        """HIVE to HBD conversions; always empty."""
        _string_list(params)
        return []

    def list_proposals(self, params: Any) -> List[str]:
        _any_list(params)
        return []

    def expose(self, register: RegisterMethod) -> None:
        for name in _EXPOSED:
            register(name, name)