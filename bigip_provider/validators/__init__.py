from .types import DeviceUri, FieldValue, SchemaValidator, ValidationResult
from .validators import (
    get_device_uri,
    is_valid_ip,
    validate_assignment_type,
    validate_data_group_type,
    validate_enabled_disabled,
    validate_f5_name,
    validate_f5_name_with_directory,
    validate_partition_name,
    validate_pool_license_type,
    validate_pool_member_name,
    validate_req_pref_disabled,
    validate_set_values,
    validate_string_value,
)
