# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# Transport subcodes
TRANSPORT_CONNECTION = "transport_connection"
TRANSPORT_TIMEOUT = "transport_timeout"
TRANSPORT_OTHER = "transport_other"

# Decode subcodes
DECODE_NOT_JSON = "decode_not_json"
DECODE_UNEXPECTED_SHAPE = "decode_unexpected_shape"

# Validation subcodes
VALIDATION_TABLE_EMPTY = "validation_table_empty"
VALIDATION_NEGATIVE_SKIP = "validation_negative_skip"
VALIDATION_NEGATIVE_TOP = "validation_negative_top"
VALIDATION_NOT_INT = "validation_not_int"
VALIDATION_RECORD_NOT_DICT = "validation_record_not_dict"
