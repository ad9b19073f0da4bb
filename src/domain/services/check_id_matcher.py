def matches_check_id(check_id: str, pattern: str) -> bool:
    """Match a check id against an id or wildcard pattern.

    Supported forms:
    - "*"         every check
    - "*:*"       every namespaced check
    - "*:tests"   any namespace, given suffix
    - "node:*"    given namespace, any suffix
    - anything without "*" must match exactly
    """
    pattern = pattern.strip()
    if not pattern:
        return False

    if "*" not in pattern:
        return check_id == pattern

    if pattern == "*":
        return True

    if pattern == "*:*":
        return ":" in check_id

    if pattern.startswith("*:"):
        suffix = pattern[2:]
        return "*" not in suffix and check_id.endswith(":" + suffix)

    if pattern.endswith(":*"):
        prefix = pattern[:-2]
        return "*" not in prefix and check_id.startswith(prefix + ":")

    # Anything else (e.g. "*:*:*") is ambiguous and never matches
    return False


def is_disabled(check_id: str, patterns: list[str]) -> bool:
    return any(matches_check_id(check_id, p) for p in patterns)
