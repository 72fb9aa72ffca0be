"""
Firewall endpoints (``/api/v1/firewall/...``): aliases, alias entries and rules.

Write calls take an ``apply`` flag; when False the change is staged and
takes effect on the next :meth:`FirewallService.apply`.
"""

from typing import Dict, List, Optional

from ..logging import get_logger
from ..models.firewall import (
    FirewallAlias,
    FirewallAliasRequest,
    FirewallRule,
    FirewallRuleRequest,
)
from ..utils import format_query_bool
from .base import BaseService

logger = get_logger(__name__)

ALIAS_ENDPOINT = "api/v1/firewall/alias"
ALIAS_ENTRY_ENDPOINT = "api/v1/firewall/alias/entry"
RULE_ENDPOINT = "api/v1/firewall/rule"
FIREWALL_APPLY_ENDPOINT = "api/v1/firewall/apply"


class FirewallService(BaseService):
    """Firewall aliases and rules."""

    # --- Aliases ---

    def list_aliases(self) -> List[FirewallAlias]:
        return self._list_models(ALIAS_ENDPOINT, FirewallAlias)

    def create_alias(
        self, request: FirewallAliasRequest, apply: bool = False
    ) -> Optional[FirewallAlias]:
        logger.info(f"Creating {request.type} alias {request.name}")
        return self._write_model(
            "POST", ALIAS_ENDPOINT, FirewallAlias, payload=self._payload(request, apply=apply))

    def update_alias(
        self, alias_id: str, request: FirewallAliasRequest, apply: bool = False
    ) -> Optional[FirewallAlias]:
        """
        Replace the alias named ``alias_id``.

        Args:
            alias_id: Current name of the alias.
            request: New alias definition (may rename it).
            apply: Whether to reload the filter immediately.
        """
        logger.info(f"Updating alias {alias_id}")
        return self._write_model(
            "PUT", ALIAS_ENDPOINT, FirewallAlias,
            payload=self._payload(request, apply=apply, id=alias_id))

    def delete_alias(self, alias_id: str, apply: bool = False):
        logger.info(f"Deleting alias {alias_id}")
        self.client.delete(
            ALIAS_ENDPOINT, params={"id": alias_id, "apply": format_query_bool(apply)})

    def add_alias_entries(self, name: str, entries: Dict[str, str], apply: bool = False):
        """
        Add addresses to an existing alias.

        Args:
            name: Name of the alias.
            entries: Mapping of address (host, network or port) to its description.
            apply: Whether to reload the filter immediately.
        """
        logger.info(f"Adding {len(entries)} entries to alias {name}")
        payload = {
            "address": list(entries.keys()),
            "apply": apply,
            "detail": list(entries.values()),
            "name": name,
        }
        self.client.post(ALIAS_ENTRY_ENDPOINT, json_payload=payload)

    def delete_alias_entry(self, name: str, address: str, apply: bool = False):
        logger.info(f"Deleting {address} from alias {name}")
        self.client.delete(
            ALIAS_ENTRY_ENDPOINT,
            params={"name": name, "address": address, "apply": format_query_bool(apply)},
        )

    # --- Rules ---

    def list_rules(self) -> List[FirewallRule]:
        return self._list_models(RULE_ENDPOINT, FirewallRule)

    def create_rule(
        self, request: FirewallRuleRequest, apply: bool = False
    ) -> Optional[FirewallRule]:
        logger.info(f"Creating {request.type} rule '{request.descr}' on {request.interface}")
        return self._write_model(
            "POST", RULE_ENDPOINT, FirewallRule, payload=self._payload(request, apply=apply))

    def update_rule(
        self, tracker: int, request: FirewallRuleRequest, apply: bool = False
    ) -> Optional[FirewallRule]:
        """
        Replace the rule identified by ``tracker``.

        Returns:
            The updated rule.
        """
        logger.info(f"Updating rule {tracker}")
        return self._write_model(
            "PUT", RULE_ENDPOINT, FirewallRule,
            payload=self._payload(request, apply=apply, tracker=tracker))

    def delete_rule(self, tracker: int, apply: bool = False):
        logger.info(f"Deleting rule {tracker}")
        self.client.delete(
            RULE_ENDPOINT, params={"tracker": str(tracker), "apply": format_query_bool(apply)})

    def apply(self):
        """Reload the filter with all staged changes."""
        self.client.post(FIREWALL_APPLY_ENDPOINT)
