"""
Field validators for BIG-IP object names and enumerated values.

Every validator takes the raw field value and the field name and returns a
``ValidationResult``; one error is reported per offending value, warnings
are currently never produced.
"""
import ipaddress
import re
from collections.abc import Set
from typing import Callable, Iterable, List

from .types import DeviceUri, FieldValue, SchemaValidator, ValidationResult

F5_NAME = re.compile(r"^/[\w\-.]+/[\w\-.:]+$", re.ASCII)
F5_NAME_WITH_DIRECTORY = re.compile(r"^/[\w\-.]+/[\w\-.:]+/[\w\-.:]+$|^/[\w\-.]+/[\w\-.:]+$", re.ASCII)
PARTITION_NAME = re.compile(r"^[^/\s]\S*$")
POOL_MEMBER_PATH = re.compile(r"^/[\w\-.]+/[\w\-.:]+[.:]\d+$", re.ASCII)
POOL_MEMBER_IPV6 = re.compile(r"^(?P<address>[0-9A-Fa-f:.%]+)\.\d+$")
POOL_MEMBER_HOST = re.compile(r"^[\w\-.]+:\d+$", re.ASCII)
DEVICE_URI = re.compile(r"^(?:(?:(https?|s?ftp):)//)([^:/\s]+)(?::(\d*))?")


def _values(value: FieldValue) -> List[str]:
    match value:
        case str():
            return [value]
        case Set():
            values = list(value)
        case list() | tuple():
            values = list(value)
        case _:
            raise TypeError(f"Unknown type {type(value).__name__} for field value")
    for v in values:
        if not isinstance(v, str):
            raise TypeError(f"Unknown type {type(v).__name__} in field value")
    return sorted(values) if isinstance(value, Set) else values


def _check(value: FieldValue, field: str, accept: Callable[[str], bool], message: str) -> ValidationResult:
    errors = [f'"{field}" {message}' for v in _values(value) if not accept(v)]
    return ValidationResult([], errors)


def _matches(pattern: re.Pattern) -> Callable[[str], bool]:
    return lambda v: pattern.fullmatch(v) is not None


def _one_of(choices: Iterable[str], ignore_case: bool = False) -> Callable[[str], bool]:
    if ignore_case:
        folded = {c.casefold() for c in choices}
        return lambda v: v.casefold() in folded
    allowed = set(choices)
    return lambda v: v in allowed


def validate_set_values(valid: Set[str]) -> SchemaValidator:
    """Accept a set only when all of its elements belong to ``valid``."""
    def validator(value: Set[str], field: str) -> ValidationResult:
        if not isinstance(value, Set):
            raise TypeError(f"Unknown type {type(value).__name__} for set value")
        errors = []
        if not set(_values(value)) <= set(valid):
            errors.append(f'"{field}" can only contain {sorted(value)}')
        return ValidationResult([], errors)
    return validator


def validate_string_value(values: List[str]) -> SchemaValidator:
    def validator(value: str, field: str) -> ValidationResult:
        if value in values:
            return ValidationResult([], [])
        return ValidationResult([], [f'"{field}" must be one of {values}'])
    return validator


def validate_f5_name(value: FieldValue, field: str) -> ValidationResult:
    return _check(value, field, _matches(F5_NAME),
                  "must match /Partition/Name and contain letters, numbers or [._-:]. e.g. /Common/my-pool")


def validate_f5_name_with_directory(value: FieldValue, field: str) -> ValidationResult:
    return _check(value, field, _matches(F5_NAME_WITH_DIRECTORY),
                  "must match /Partition/Name or /Partition/Directory/Name e.g. /Common/my-node or /Common/test/my-node")


def validate_partition_name(value: FieldValue, field: str) -> ValidationResult:
    return _check(value, field, _matches(PARTITION_NAME),
                  "name should not start with `/`, e.g Common [or] test-partition are valid")


def _is_ipv6_member(value: str) -> bool:
    match = POOL_MEMBER_IPV6.fullmatch(value)
    if match is None:
        return False
    try:
        return ipaddress.ip_address(match.group("address")).version == 6
    except ValueError:
        return False


def validate_pool_member_name(value: FieldValue, field: str) -> ValidationResult:
    """
    Pool members are either ``/Partition/Node:Port`` (``/Partition/Node.Port``
    for IPv6 nodes), a bare IPv6 ``address.port`` or ``host:port`` where host
    is an IP address or FQDN.
    """
    errors = []
    for v in _values(value):
        if v.startswith("/"):
            if POOL_MEMBER_PATH.fullmatch(v) is None:
                errors.append(f'"{field}" must match /Partition/Node_Name:Port and contain letters, '
                              'numbers or [:._-]. e.g. /Common/node1:80')
        elif v.count(":") >= 2:
            if not _is_ipv6_member(v):
                errors.append(f'"{field}" must match IPv6-address.Port or /Partition/Node_Name.Port. '
                              'e.g. 2001:db8::1.80')
        elif POOL_MEMBER_HOST.fullmatch(v) is None:
            errors.append(f'"{field}" must match Node-address:Port and Node Address is IP/FQDN. '
                          'e.g. 1.1.1.1:80/www.google.com:80')
    return ValidationResult([], errors)


def is_valid_ip(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def validate_enabled_disabled(value: FieldValue, field: str) -> ValidationResult:
    return _check(value, field, _one_of(["enabled", "disabled"]),
                  "must match as enabled or disabled")


def validate_req_pref_disabled(value: FieldValue, field: str) -> ValidationResult:
    return _check(value, field, _one_of(["required", "preferred", "disabled"]),
                  "must match as required, preferred, or disabled")


def validate_data_group_type(value: FieldValue, field: str) -> ValidationResult:
    return _check(value, field, _one_of(["string", "ip", "integer"]),
                  "must match as string, ip, or integer")


def validate_pool_license_type(value: FieldValue, field: str) -> ValidationResult:
    return _check(value, field, _one_of(["Utility", "regkey"], ignore_case=True),
                  "must match as Utility (or) Regkey")


def validate_assignment_type(value: FieldValue, field: str) -> ValidationResult:
    return _check(value, field, _one_of(["MANAGED", "UNMANAGED", "UNREACHABLE"], ignore_case=True),
                  "must match as MANAGED/UNMANAGED/UNREACHABLE")


def get_device_uri(value: str) -> DeviceUri|None:
    match = DEVICE_URI.match(value)
    if match is None:
        return None
    scheme, host, port = match.groups()
    return DeviceUri(scheme=scheme, host=host, port=port or None)
