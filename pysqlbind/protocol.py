"""Constants shared by the engine and the native client driver.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

# pylint: disable=bad-whitespace

# Column / parameter type tags
TYPE_DECIMAL                      = 0
TYPE_TINY                         = 1
TYPE_SHORT                        = 2
TYPE_LONG                         = 3
TYPE_FLOAT                        = 4
TYPE_DOUBLE                       = 5
TYPE_NULL                         = 6
TYPE_TIMESTAMP                    = 7
TYPE_LONGLONG                     = 8
TYPE_INT24                        = 9
TYPE_DATE                         = 10
TYPE_TIME                         = 11
TYPE_DATETIME                     = 12
TYPE_YEAR                         = 13
TYPE_NEWDATE                      = 14
TYPE_VARCHAR                      = 15
TYPE_BIT                          = 16
TYPE_JSON                         = 245
TYPE_NEWDECIMAL                   = 246
TYPE_ENUM                         = 247
TYPE_SET                          = 248
TYPE_TINY_BLOB                    = 249
TYPE_MEDIUM_BLOB                  = 250
TYPE_LONG_BLOB                    = 251
TYPE_BLOB                         = 252
TYPE_VAR_STRING                   = 253
TYPE_STRING                       = 254
TYPE_GEOMETRY                     = 255

# Kinds of native time records
TIMESTAMP_NONE                    = -2
TIMESTAMP_ERROR                   = -1
TIMESTAMP_DATE                    = 0
TIMESTAMP_DATETIME                = 1
TIMESTAMP_TIME                    = 2

# Column flags
NOT_NULL_FLAG                     = 1
PRI_KEY_FLAG                      = 2
UNIQUE_KEY_FLAG                   = 4
BLOB_FLAG                         = 16
UNSIGNED_FLAG                     = 32
ZEROFILL_FLAG                     = 64
BINARY_FLAG                       = 128
AUTO_INCREMENT_FLAG               = 512

# Client capability flags passed at connect time
CLIENT_FOUND_ROWS                 = 1 << 1
CLIENT_COMPRESS                   = 1 << 5
CLIENT_LOCAL_FILES                = 1 << 7
CLIENT_IGNORE_SPACE               = 1 << 8
CLIENT_INTERACTIVE                = 1 << 10
CLIENT_MULTI_STATEMENTS           = 1 << 16
CLIENT_MULTI_RESULTS              = 1 << 17
CLIENT_PS_MULTI_RESULTS           = 1 << 18

# Connection option tags
OPT_CONNECT_TIMEOUT               = 0
OPT_COMPRESS                      = 1
OPT_NAMED_PIPE                    = 2
INIT_COMMAND                      = 3
READ_DEFAULT_FILE                 = 4
READ_DEFAULT_GROUP                = 5
SET_CHARSET_DIR                   = 6
SET_CHARSET_NAME                  = 7
OPT_LOCAL_INFILE                  = 8
OPT_PROTOCOL                      = 9
SHARED_MEMORY_BASE_NAME           = 10
OPT_READ_TIMEOUT                  = 11
OPT_WRITE_TIMEOUT                 = 12
OPT_RECONNECT                     = 20

# Status codes
STATUS_OK                         = 0
NO_MORE_RESULTS                   = -1
FETCH_NO_DATA                     = 1
FETCH_DATA_TRUNCATED              = 101

# Sentinels reported by counting primitives
AFFECTED_ROWS_ERROR               = 2 ** 64 - 1
ESCAPE_ERROR                      = 2 ** 32 - 1

DEFAULT_PORT                      = 3306
DEFAULT_SOCKET                    = None

# Client error codes
CR_UNKNOWN_ERROR                  = 2000
CR_SOCKET_CREATE_ERROR            = 2001
CR_CONNECTION_ERROR               = 2002
CR_CONN_HOST_ERROR                = 2003
CR_UNKNOWN_HOST                   = 2005
CR_SERVER_GONE_ERROR              = 2006
CR_VERSION_ERROR                  = 2007
CR_OUT_OF_MEMORY                  = 2008
CR_WRONG_HOST_INFO                = 2009
CR_SERVER_HANDSHAKE_ERR           = 2012
CR_SERVER_LOST                    = 2013
CR_COMMANDS_OUT_OF_SYNC           = 2014
CR_CANT_READ_CHARSET              = 2019
CR_NULL_POINTER                   = 2029
CR_NO_PREPARE_STMT                = 2030
CR_PARAMS_NOT_BOUND               = 2031
CR_DATA_TRUNCATED                 = 2032
CR_NO_PARAMETERS_EXISTS           = 2033
CR_INVALID_PARAMETER_NO           = 2034
CR_INVALID_BUFFER_USE             = 2035
CR_UNSUPPORTED_PARAM_TYPE         = 2036
CR_NO_DATA                        = 2051
CR_NO_STMT_METADATA               = 2052
CR_NO_RESULT_SET                  = 2053
CR_NOT_IMPLEMENTED                = 2054

# Common server error codes
ER_DUP_ENTRY                      = 1062
ER_PARSE_ERROR                    = 1064
ER_NO_SUCH_TABLE                  = 1146
ER_BAD_FIELD_ERROR                = 1054
ER_WRONG_ARGUMENTS                = 1210
ER_UNKNOWN_STMT_HANDLER           = 1243


stringifyError = {
    CR_UNKNOWN_ERROR: 'CR_UNKNOWN_ERROR',
    CR_SOCKET_CREATE_ERROR: 'CR_SOCKET_CREATE_ERROR',
    CR_CONNECTION_ERROR: 'CR_CONNECTION_ERROR',
    CR_CONN_HOST_ERROR: 'CR_CONN_HOST_ERROR',
    CR_UNKNOWN_HOST: 'CR_UNKNOWN_HOST',
    CR_SERVER_GONE_ERROR: 'CR_SERVER_GONE_ERROR',
    CR_VERSION_ERROR: 'CR_VERSION_ERROR',
    CR_OUT_OF_MEMORY: 'CR_OUT_OF_MEMORY',
    CR_WRONG_HOST_INFO: 'CR_WRONG_HOST_INFO',
    CR_SERVER_HANDSHAKE_ERR: 'CR_SERVER_HANDSHAKE_ERR',
    CR_SERVER_LOST: 'CR_SERVER_LOST',
    CR_COMMANDS_OUT_OF_SYNC: 'CR_COMMANDS_OUT_OF_SYNC',
    CR_CANT_READ_CHARSET: 'CR_CANT_READ_CHARSET',
    CR_NULL_POINTER: 'CR_NULL_POINTER',
    CR_NO_PREPARE_STMT: 'CR_NO_PREPARE_STMT',
    CR_PARAMS_NOT_BOUND: 'CR_PARAMS_NOT_BOUND',
    CR_DATA_TRUNCATED: 'CR_DATA_TRUNCATED',
    CR_NO_PARAMETERS_EXISTS: 'CR_NO_PARAMETERS_EXISTS',
    CR_INVALID_PARAMETER_NO: 'CR_INVALID_PARAMETER_NO',
    CR_INVALID_BUFFER_USE: 'CR_INVALID_BUFFER_USE',
    CR_UNSUPPORTED_PARAM_TYPE: 'CR_UNSUPPORTED_PARAM_TYPE',
    CR_NO_DATA: 'CR_NO_DATA',
    CR_NO_STMT_METADATA: 'CR_NO_STMT_METADATA',
    CR_NO_RESULT_SET: 'CR_NO_RESULT_SET',
    CR_NOT_IMPLEMENTED: 'CR_NOT_IMPLEMENTED',
    ER_DUP_ENTRY: 'ER_DUP_ENTRY',
    ER_PARSE_ERROR: 'ER_PARSE_ERROR',
    ER_NO_SUCH_TABLE: 'ER_NO_SUCH_TABLE',
    ER_BAD_FIELD_ERROR: 'ER_BAD_FIELD_ERROR',
    ER_WRONG_ARGUMENTS: 'ER_WRONG_ARGUMENTS',
    ER_UNKNOWN_STMT_HANDLER: 'ER_UNKNOWN_STMT_HANDLER',
}


def lookup_code(error_code):
    # type: (int) -> str
    """Return a string-ified version of an error code."""
    return stringifyError.get(error_code, '[UNKNOWN ERROR CODE]')
