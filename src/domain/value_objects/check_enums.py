from enum import Enum


class CheckStatus(str, Enum):
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


class Language(str, Enum):
    COMMON = "common"  # ecosystem-agnostic
    GO = "go"
    PYTHON = "python"
    NODE = "node"
    JAVA = "java"
    RUST = "rust"
    TYPESCRIPT = "typescript"
    SWIFT = "swift"


class Severity(str, Enum):
    """How an external check classifies an ambiguous (exit code 1) failure."""

    WARN = "warn"
    FAIL = "fail"
