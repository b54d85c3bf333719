"""Look up a classification policy by kind."""

from .LinkPolicy import DEFAULT_POLICY, LinkPolicy
from .WikiLinkPolicy import WIKI_POLICY

_POLICIES: dict[str, LinkPolicy] = {
    DEFAULT_POLICY.name: DEFAULT_POLICY,
    WIKI_POLICY.name: WIKI_POLICY,
}


def get_policy(kind: str = "link") -> LinkPolicy:
    """Return the policy registered for kind ("link" or "wiki").

    Raises:
        ValueError: If kind is not registered
    """
    policy = _POLICIES.get(kind)
    if policy is None:
        raise ValueError(f"Unknown link kind: {kind} (supported: {sorted(_POLICIES)})")
    return policy
