"""
PostgreSQL error classes and error codes.

Transcribed from Appendix A of the PostgreSQL documentation
(https://www.postgresql.org/docs/current/errcodes-appendix.html).
Rows are (prefix, constant, description) for classes and
(sqlstate, constant, display name) for codes; the registry builds
its enums from these tables.
"""

ERROR_CLASSES: tuple[tuple[str, str, str], ...] = (
    ("00", "SUCCESSFUL_COMPLETION", "Successful Completion"),
    ("01", "WARNING", "Warning"),
    ("02", "NO_DATA", "No Data"),
    ("03", "SQL_STATEMENT_NOT_YET_COMPLETE", "SQL Statement Not Yet Complete"),
    ("08", "CONNECTION_EXCEPTION", "Connection Exception"),
    ("09", "TRIGGERED_ACTION_EXCEPTION", "Triggered Action Exception"),
    ("0A", "FEATURE_NOT_SUPPORTED", "Feature Not Supported"),
    ("0B", "INVALID_TRANSACTION_INITIATION", "Invalid Transaction Initiation"),
    ("0F", "LOCATOR_EXCEPTION", "Locator Exception"),
    ("0L", "INVALID_GRANTOR", "Invalid Grantor"),
    ("0P", "INVALID_ROLE_SPECIFICATION", "Invalid Role Specification"),
    ("0Z", "DIAGNOSTICS_EXCEPTION", "Diagnostics Exception"),
    ("20", "CASE_NOT_FOUND", "Case Not Found"),
    ("21", "CARDINALITY_VIOLATION", "Cardinality Violation"),
    ("22", "DATA_EXCEPTION", "Data Exception"),
    ("23", "INTEGRITY_CONSTRAINT_VIOLATION", "Integrity Constraint Violation"),
    ("24", "INVALID_CURSOR_STATE", "Invalid Cursor State"),
    ("25", "INVALID_TRANSACTION_STATE", "Invalid Transaction State"),
    ("26", "INVALID_SQL_STATEMENT_NAME", "Invalid SQL Statement Name"),
    ("27", "TRIGGERED_DATA_CHANGE_VIOLATION", "Triggered Data Change Violation"),
    ("28", "INVALID_AUTHORIZATION_SPECIFICATION", "Invalid Authorization Specification"),
    ("2B", "DEPENDENT_PRIVILEGE_DESCRIPTORS_STILL_EXIST", "Dependent Privilege Descriptors Still Exist"),
    ("2D", "INVALID_TRANSACTION_TERMINATION", "Invalid Transaction Termination"),
    ("2F", "SQL_ROUTINE_EXCEPTION", "SQL Routine Exception"),
    ("34", "INVALID_CURSOR_NAME", "Invalid Cursor Name"),
    ("38", "EXTERNAL_ROUTINE_EXCEPTION", "External Routine Exception"),
    ("39", "EXTERNAL_ROUTINE_INVOCATION_EXCEPTION", "External Routine Invocation Exception"),
    ("3B", "SAVEPOINT_EXCEPTION", "Savepoint Exception"),
    ("3D", "INVALID_CATALOG_NAME", "Invalid Catalog Name"),
    ("3F", "INVALID_SCHEMA_NAME", "Invalid Schema Name"),
    ("40", "TRANSACTION_ROLLBACK", "Transaction Rollback"),
    ("42", "SYNTAX_ERROR_OR_ACCESS_RULE_VIOLATION", "Syntax Error or Access Rule Violation"),
    ("44", "WITH_CHECK_OPTION_VIOLATION", "WITH CHECK OPTION Violation"),
    ("53", "INSUFFICIENT_RESOURCES", "Insufficient Resources"),
    ("54", "PROGRAM_LIMIT_EXCEEDED", "Program Limit Exceeded"),
    ("55", "OBJECT_NOT_IN_PREREQUISITE_STATE", "Object Not In Prerequisite State"),
    ("57", "OPERATOR_INTERVENTION", "Operator Intervention"),
    ("58", "SYSTEM_ERROR", "System Error"),
    ("72", "SNAPSHOT_FAILURE", "Snapshot Failure"),
    ("F0", "CONFIGURATION_FILE_ERROR", "Configuration File Error"),
    ("HV", "FOREIGN_DATA_WRAPPER_ERROR", "Foreign Data Wrapper Error (SQL/MED)"),
    ("P0", "PLPGSQL_ERROR", "PL/pgSQL Error"),
    ("XX", "INTERNAL_ERROR", "Internal Error"),
)

ERROR_CODES: tuple[tuple[str, str, str], ...] = (
    # Class 00 - Successful Completion
    ("00000", "SUCCESSFUL_COMPLETION", "SuccessfulCompletion"),

    # Class 01 - Warning
    ("01000", "WARNING", "Warning"),
    ("0100C", "WARNING_DYNAMIC_RESULT_SETS_RETURNED", "DynamicResultSetsReturned"),
    ("01008", "WARNING_IMPLICIT_ZERO_BIT_PADDING", "ImplicitZeroBitPadding"),
    ("01003", "WARNING_NULL_VALUE_ELIMINATED_IN_SET_FUNCTION", "NullValueEliminatedInSetFunction"),
    ("01007", "WARNING_PRIVILEGE_NOT_GRANTED", "PrivilegeNotGranted"),
    ("01006", "WARNING_PRIVILEGE_NOT_REVOKED", "PrivilegeNotRevoked"),
    ("01004", "WARNING_STRING_DATA_RIGHT_TRUNCATION", "StringDataRightTruncationWarning"),
    ("01P01", "WARNING_DEPRECATED_FEATURE", "DeprecatedFeature"),

    # Class 02 - No Data
    ("02000", "NO_DATA", "NoData"),
    ("02001", "NO_ADDITIONAL_DYNAMIC_RESULT_SETS_RETURNED", "NoAdditionalDynamicResultSetsReturned"),

    # Class 03 - SQL Statement Not Yet Complete
    ("03000", "SQL_STATEMENT_NOT_YET_COMPLETE", "SqlStatementNotYetComplete"),

    # Class 08 - Connection Exception
    ("08000", "CONNECTION_EXCEPTION", "ConnectionException"),
    ("08001", "SQLCLIENT_UNABLE_TO_ESTABLISH_SQLCONNECTION", "SqlclientUnableToEstablishSqlconnection"),
    ("08003", "CONNECTION_DOES_NOT_EXIST", "ConnectionDoesNotExist"),
    ("08004", "SQLSERVER_REJECTED_ESTABLISHMENT_OF_SQLCONNECTION", "SqlserverRejectedEstablishmentOfSqlconnection"),
    ("08006", "CONNECTION_FAILURE", "ConnectionFailure"),
    ("08007", "TRANSACTION_RESOLUTION_UNKNOWN", "TransactionResolutionUnknown"),
    ("08P01", "PROTOCOL_VIOLATION", "ProtocolViolation"),

    # Class 09 - Triggered Action Exception
    ("09000", "TRIGGERED_ACTION_EXCEPTION", "TriggeredActionException"),

    # Class 0A - Feature Not Supported
    ("0A000", "FEATURE_NOT_SUPPORTED", "FeatureNotSupported"),

    # Class 0B - Invalid Transaction Initiation
    ("0B000", "INVALID_TRANSACTION_INITIATION", "InvalidTransactionInitiation"),

    # Class 0F - Locator Exception
    ("0F000", "LOCATOR_EXCEPTION", "LocatorException"),
    ("0F001", "INVALID_LOCATOR_SPECIFICATION", "InvalidLocatorSpecification"),

    # Class 0L - Invalid Grantor
    ("0L000", "INVALID_GRANTOR", "InvalidGrantor"),
    ("0LP01", "INVALID_GRANT_OPERATION", "InvalidGrantOperation"),

    # Class 0P - Invalid Role Specification
    ("0P000", "INVALID_ROLE_SPECIFICATION", "InvalidRoleSpecification"),

    # Class 0Z - Diagnostics Exception
    ("0Z000", "DIAGNOSTICS_EXCEPTION", "DiagnosticsException"),
    ("0Z002", "STACKED_DIAGNOSTICS_ACCESSED_WITHOUT_ACTIVE_HANDLER", "StackedDiagnosticsAccessedWithoutActiveHandler"),

    # Class 20 - Case Not Found
    ("20000", "CASE_NOT_FOUND", "CaseNotFound"),

    # Class 21 - Cardinality Violation
    ("21000", "CARDINALITY_VIOLATION", "CardinalityViolation"),

    # Class 22 - Data Exception
    ("22000", "DATA_EXCEPTION", "DataException"),
    ("22001", "STRING_DATA_RIGHT_TRUNCATION", "StringDataRightTruncation"),
    ("22002", "NULL_VALUE_NO_INDICATOR_PARAMETER", "NullValueNoIndicatorParameter"),
    ("22003", "NUMERIC_VALUE_OUT_OF_RANGE", "NumericValueOutOfRange"),
    ("22004", "NULL_VALUE_NOT_ALLOWED", "NullValueNotAllowed"),
    ("22005", "ERROR_IN_ASSIGNMENT", "ErrorInAssignment"),
    ("22007", "INVALID_DATETIME_FORMAT", "InvalidDatetimeFormat"),
    ("22008", "DATETIME_FIELD_OVERFLOW", "DatetimeFieldOverflow"),
    ("22009", "INVALID_TIME_ZONE_DISPLACEMENT_VALUE", "InvalidTimeZoneDisplacementValue"),
    ("2200B", "ESCAPE_CHARACTER_CONFLICT", "EscapeCharacterConflict"),
    ("2200C", "INVALID_USE_OF_ESCAPE_CHARACTER", "InvalidUseOfEscapeCharacter"),
    ("2200D", "INVALID_ESCAPE_OCTET", "InvalidEscapeOctet"),
    ("2200F", "ZERO_LENGTH_CHARACTER_STRING", "ZeroLengthCharacterString"),
    ("2200G", "MOST_SPECIFIC_TYPE_MISMATCH", "MostSpecificTypeMismatch"),
    ("2200H", "SEQUENCE_GENERATOR_LIMIT_EXCEEDED", "SequenceGeneratorLimitExceeded"),
    ("2200L", "NOT_AN_XML_DOCUMENT", "NotAnXmlDocument"),
    ("2200M", "INVALID_XML_DOCUMENT", "InvalidXmlDocument"),
    ("2200N", "INVALID_XML_CONTENT", "InvalidXmlContent"),
    ("2200S", "INVALID_XML_COMMENT", "InvalidXmlComment"),
    ("2200T", "INVALID_XML_PROCESSING_INSTRUCTION", "InvalidXmlProcessingInstruction"),
    ("22010", "INVALID_INDICATOR_PARAMETER_VALUE", "InvalidIndicatorParameterValue"),
    ("22011", "SUBSTRING_ERROR", "SubstringError"),
    ("22012", "DIVISION_BY_ZERO", "DivisionByZero"),
    ("22013", "INVALID_PRECEDING_OR_FOLLOWING_SIZE", "InvalidPrecedingOrFollowingSize"),
    ("22014", "INVALID_ARGUMENT_FOR_NTILE_FUNCTION", "InvalidArgumentForNtileFunction"),
    ("22015", "INTERVAL_FIELD_OVERFLOW", "IntervalFieldOverflow"),
    ("22016", "INVALID_ARGUMENT_FOR_NTH_VALUE_FUNCTION", "InvalidArgumentForNthValueFunction"),
    ("22018", "INVALID_CHARACTER_VALUE_FOR_CAST", "InvalidCharacterValueForCast"),
    ("22019", "INVALID_ESCAPE_CHARACTER", "InvalidEscapeCharacter"),
    ("2201B", "INVALID_REGULAR_EXPRESSION", "InvalidRegularExpression"),
    ("2201E", "INVALID_ARGUMENT_FOR_LOGARITHM", "InvalidArgumentForLogarithm"),
    ("2201F", "INVALID_ARGUMENT_FOR_POWER_FUNCTION", "InvalidArgumentForPowerFunction"),
    ("2201G", "INVALID_ARGUMENT_FOR_WIDTH_BUCKET_FUNCTION", "InvalidArgumentForWidthBucketFunction"),
    ("2201W", "INVALID_ROW_COUNT_IN_LIMIT_CLAUSE", "InvalidRowCountInLimitClause"),
    ("2201X", "INVALID_ROW_COUNT_IN_RESULT_OFFSET_CLAUSE", "InvalidRowCountInResultOffsetClause"),
    ("22021", "CHARACTER_NOT_IN_REPERTOIRE", "CharacterNotInRepertoire"),
    ("22022", "INDICATOR_OVERFLOW", "IndicatorOverflow"),
    ("22023", "INVALID_PARAMETER_VALUE", "InvalidParameterValue"),
    ("22024", "UNTERMINATED_C_STRING", "UnterminatedCString"),
    ("22025", "INVALID_ESCAPE_SEQUENCE", "InvalidEscapeSequence"),
    ("22026", "STRING_DATA_LENGTH_MISMATCH", "StringDataLengthMismatch"),
    ("22027", "TRIM_ERROR", "TrimError"),
    ("2202E", "ARRAY_SUBSCRIPT_ERROR", "ArraySubscriptError"),
    ("2202G", "INVALID_TABLESAMPLE_REPEAT", "InvalidTablesampleRepeat"),
    ("2202H", "INVALID_TABLESAMPLE_ARGUMENT", "InvalidTablesampleArgument"),
    ("22030", "DUPLICATE_JSON_OBJECT_KEY_VALUE", "DuplicateJsonObjectKeyValue"),
    ("22031", "INVALID_ARGUMENT_FOR_SQL_JSON_DATETIME_FUNCTION", "InvalidArgumentForSqlJsonDatetimeFunction"),
    ("22032", "INVALID_JSON_TEXT", "InvalidJsonText"),
    ("22033", "INVALID_SQL_JSON_SUBSCRIPT", "InvalidSqlJsonSubscript"),
    ("22034", "MORE_THAN_ONE_SQL_JSON_ITEM", "MoreThanOneSqlJsonItem"),
    ("22035", "NO_SQL_JSON_ITEM", "NoSqlJsonItem"),
    ("22036", "NON_NUMERIC_SQL_JSON_ITEM", "NonNumericSqlJsonItem"),
    ("22037", "NON_UNIQUE_KEYS_IN_A_JSON_OBJECT", "NonUniqueKeysInAJsonObject"),
    ("22038", "SINGLETON_SQL_JSON_ITEM_REQUIRED", "SingletonSqlJsonItemRequired"),
    ("22039", "SQL_JSON_ARRAY_NOT_FOUND", "SqlJsonArrayNotFound"),
    ("2203A", "SQL_JSON_MEMBER_NOT_FOUND", "SqlJsonMemberNotFound"),
    ("2203B", "SQL_JSON_NUMBER_NOT_FOUND", "SqlJsonNumberNotFound"),
    ("2203C", "SQL_JSON_OBJECT_NOT_FOUND", "SqlJsonObjectNotFound"),
    ("2203D", "TOO_MANY_JSON_ARRAY_ELEMENTS", "TooManyJsonArrayElements"),
    ("2203E", "TOO_MANY_JSON_OBJECT_MEMBERS", "TooManyJsonObjectMembers"),
    ("2203F", "SQL_JSON_SCALAR_REQUIRED", "SqlJsonScalarRequired"),
    ("22P01", "FLOATING_POINT_EXCEPTION", "FloatingPointException"),
    ("22P02", "INVALID_TEXT_REPRESENTATION", "InvalidTextRepresentation"),
    ("22P03", "INVALID_BINARY_REPRESENTATION", "InvalidBinaryRepresentation"),
    ("22P04", "BAD_COPY_FILE_FORMAT", "BadCopyFileFormat"),
    ("22P05", "UNTRANSLATABLE_CHARACTER", "UntranslatableCharacter"),
    ("22P06", "NONSTANDARD_USE_OF_ESCAPE_CHARACTER", "NonstandardUseOfEscapeCharacter"),

    # Class 23 - Integrity Constraint Violation
    ("23000", "INTEGRITY_CONSTRAINT_VIOLATION", "IntegrityConstraintViolation"),
    ("23001", "RESTRICT_VIOLATION", "RestrictViolation"),
    ("23502", "NOT_NULL_VIOLATION", "NotNullViolation"),
    ("23503", "FOREIGN_KEY_VIOLATION", "ForeignKeyViolation"),
    ("23505", "UNIQUE_VIOLATION", "UniqueViolation"),
    ("23514", "CHECK_VIOLATION", "CheckViolation"),
    ("23P01", "EXCLUSION_VIOLATION", "ExclusionViolation"),

    # Class 24 - Invalid Cursor State
    ("24000", "INVALID_CURSOR_STATE", "InvalidCursorState"),

    # Class 25 - Invalid Transaction State
    ("25000", "INVALID_TRANSACTION_STATE", "InvalidTransactionState"),
    ("25001", "ACTIVE_SQL_TRANSACTION", "ActiveSqlTransaction"),
    ("25002", "BRANCH_TRANSACTION_ALREADY_ACTIVE", "BranchTransactionAlreadyActive"),
    ("25003", "INAPPROPRIATE_ACCESS_MODE_FOR_BRANCH_TRANSACTION", "InappropriateAccessModeForBranchTransaction"),
    ("25004", "INAPPROPRIATE_ISOLATION_LEVEL_FOR_BRANCH_TRANSACTION", "InappropriateIsolationLevelForBranchTransaction"),
    ("25005", "NO_ACTIVE_SQL_TRANSACTION_FOR_BRANCH_TRANSACTION", "NoActiveSqlTransactionForBranchTransaction"),
    ("25006", "READ_ONLY_SQL_TRANSACTION", "ReadOnlySqlTransaction"),
    ("25007", "SCHEMA_AND_DATA_STATEMENT_MIXING_NOT_SUPPORTED", "SchemaAndDataStatementMixingNotSupported"),
    ("25008", "HELD_CURSOR_REQUIRES_SAME_ISOLATION_LEVEL", "HeldCursorRequiresSameIsolationLevel"),
    ("25P01", "NO_ACTIVE_SQL_TRANSACTION", "NoActiveSqlTransaction"),
    ("25P02", "IN_FAILED_SQL_TRANSACTION", "InFailedSqlTransaction"),
    ("25P03", "IDLE_IN_TRANSACTION_SESSION_TIMEOUT", "IdleInTransactionSessionTimeout"),
    ("25P04", "TRANSACTION_TIMEOUT", "TransactionTimeout"),

    # Class 26 - Invalid SQL Statement Name
    ("26000", "INVALID_SQL_STATEMENT_NAME", "InvalidSqlStatementName"),

    # Class 27 - Triggered Data Change Violation
    ("27000", "TRIGGERED_DATA_CHANGE_VIOLATION", "TriggeredDataChangeViolation"),

    # Class 28 - Invalid Authorization Specification
    ("28000", "INVALID_AUTHORIZATION_SPECIFICATION", "InvalidAuthorizationSpecification"),
    ("28P01", "INVALID_PASSWORD", "InvalidPassword"),

    # Class 2B - Dependent Privilege Descriptors Still Exist
    ("2B000", "DEPENDENT_PRIVILEGE_DESCRIPTORS_STILL_EXIST", "DependentPrivilegeDescriptorsStillExist"),
    ("2BP01", "DEPENDENT_OBJECTS_STILL_EXIST", "DependentObjectsStillExist"),

    # Class 2D - Invalid Transaction Termination
    ("2D000", "INVALID_TRANSACTION_TERMINATION", "InvalidTransactionTermination"),

    # Class 2F - SQL Routine Exception
    ("2F000", "SQL_ROUTINE_EXCEPTION", "SqlRoutineException"),
    ("2F002", "MODIFYING_SQL_DATA_NOT_PERMITTED", "ModifyingSqlDataNotPermitted"),
    ("2F003", "PROHIBITED_SQL_STATEMENT_ATTEMPTED", "ProhibitedSqlStatementAttempted"),
    ("2F004", "READING_SQL_DATA_NOT_PERMITTED", "ReadingSqlDataNotPermitted"),
    ("2F005", "FUNCTION_EXECUTED_NO_RETURN_STATEMENT", "FunctionExecutedNoReturnStatement"),

    # Class 34 - Invalid Cursor Name
    ("34000", "INVALID_CURSOR_NAME", "InvalidCursorName"),

    # Class 38 - External Routine Exception
    ("38000", "EXTERNAL_ROUTINE_EXCEPTION", "ExternalRoutineException"),
    ("38001", "CONTAINING_SQL_NOT_PERMITTED", "ContainingSqlNotPermitted"),
    ("38002", "MODIFYING_SQL_DATA_NOT_PERMITTED_EXT", "ModifyingSqlDataNotPermittedExt"),
    ("38003", "PROHIBITED_SQL_STATEMENT_ATTEMPTED_EXT", "ProhibitedSqlStatementAttemptedExt"),
    ("38004", "READING_SQL_DATA_NOT_PERMITTED_EXT", "ReadingSqlDataNotPermittedExt"),

    # Class 39 - External Routine Invocation Exception
    ("39000", "EXTERNAL_ROUTINE_INVOCATION_EXCEPTION", "ExternalRoutineInvocationException"),
    ("39001", "INVALID_SQLSTATE_RETURNED", "InvalidSqlstateReturned"),
    ("39004", "NULL_VALUE_NOT_ALLOWED_EXT", "NullValueNotAllowedExt"),
    ("39P01", "TRIGGER_PROTOCOL_VIOLATED", "TriggerProtocolViolated"),
    ("39P02", "SRF_PROTOCOL_VIOLATED", "SrfProtocolViolated"),
    ("39P03", "EVENT_TRIGGER_PROTOCOL_VIOLATED", "EventTriggerProtocolViolated"),

    # Class 3B - Savepoint Exception
    ("3B000", "SAVEPOINT_EXCEPTION", "SavepointException"),
    ("3B001", "INVALID_SAVEPOINT_SPECIFICATION", "InvalidSavepointSpecification"),

    # Class 3D - Invalid Catalog Name
    ("3D000", "INVALID_CATALOG_NAME", "InvalidCatalogName"),

    # Class 3F - Invalid Schema Name
    ("3F000", "INVALID_SCHEMA_NAME", "InvalidSchemaName"),

    # Class 40 - Transaction Rollback
    ("40000", "TRANSACTION_ROLLBACK", "TransactionRollback"),
    ("40001", "SERIALIZATION_FAILURE", "SerializationFailure"),
    ("40002", "TRANSACTION_INTEGRITY_CONSTRAINT_VIOLATION", "TransactionIntegrityConstraintViolation"),
    ("40003", "STATEMENT_COMPLETION_UNKNOWN", "StatementCompletionUnknown"),
    ("40P01", "DEADLOCK_DETECTED", "DeadlockDetected"),

    # Class 42 - Syntax Error or Access Rule Violation
    ("42000", "SYNTAX_ERROR_OR_ACCESS_RULE_VIOLATION", "SyntaxErrorOrAccessRuleViolation"),
    ("42501", "INSUFFICIENT_PRIVILEGE", "InsufficientPrivilege"),
    ("42601", "SYNTAX_ERROR", "SyntaxError"),
    ("42602", "INVALID_NAME", "InvalidName"),
    ("42611", "INVALID_COLUMN_DEFINITION", "InvalidColumnDefinition"),
    ("42622", "NAME_TOO_LONG", "NameTooLong"),
    ("42701", "DUPLICATE_COLUMN", "DuplicateColumn"),
    ("42702", "AMBIGUOUS_COLUMN", "AmbiguousColumn"),
    ("42703", "UNDEFINED_COLUMN", "UndefinedColumn"),
    ("42704", "UNDEFINED_OBJECT", "UndefinedObject"),
    ("42710", "DUPLICATE_OBJECT", "DuplicateObject"),
    ("42712", "DUPLICATE_ALIAS", "DuplicateAlias"),
    ("42723", "DUPLICATE_FUNCTION", "DuplicateFunction"),
    ("42725", "AMBIGUOUS_FUNCTION", "AmbiguousFunction"),
    ("42803", "GROUPING_ERROR", "GroupingError"),
    ("42804", "DATATYPE_MISMATCH", "DatatypeMismatch"),
    ("42809", "WRONG_OBJECT_TYPE", "WrongObjectType"),
    ("42830", "INVALID_FOREIGN_KEY", "InvalidForeignKey"),
    ("42846", "CANNOT_COERCE", "CannotCoerce"),
    ("42883", "UNDEFINED_FUNCTION", "UndefinedFunction"),
    ("428C9", "GENERATED_ALWAYS", "GeneratedAlways"),
    ("42939", "RESERVED_NAME", "ReservedName"),
    ("42P01", "UNDEFINED_TABLE", "UndefinedTable"),
    ("42P02", "UNDEFINED_PARAMETER", "UndefinedParameter"),
    ("42P03", "DUPLICATE_CURSOR", "DuplicateCursor"),
    ("42P04", "DUPLICATE_DATABASE", "DuplicateDatabase"),
    ("42P05", "DUPLICATE_PREPARED_STATEMENT", "DuplicatePreparedStatement"),
    ("42P06", "DUPLICATE_SCHEMA", "DuplicateSchema"),
    ("42P07", "DUPLICATE_TABLE", "DuplicateTable"),
    ("42P08", "AMBIGUOUS_PARAMETER", "AmbiguousParameter"),
    ("42P09", "AMBIGUOUS_ALIAS", "AmbiguousAlias"),
    ("42P10", "INVALID_COLUMN_REFERENCE", "InvalidColumnReference"),
    ("42P11", "INVALID_CURSOR_DEFINITION", "InvalidCursorDefinition"),
    ("42P12", "INVALID_DATABASE_DEFINITION", "InvalidDatabaseDefinition"),
    ("42P13", "INVALID_FUNCTION_DEFINITION", "InvalidFunctionDefinition"),
    ("42P14", "INVALID_PREPARED_STATEMENT_DEFINITION", "InvalidPreparedStatementDefinition"),
    ("42P15", "INVALID_SCHEMA_DEFINITION", "InvalidSchemaDefinition"),
    ("42P16", "INVALID_TABLE_DEFINITION", "InvalidTableDefinition"),
    ("42P17", "INVALID_OBJECT_DEFINITION", "InvalidObjectDefinition"),
    ("42P18", "INDETERMINATE_DATATYPE", "IndeterminateDatatype"),
    ("42P19", "INVALID_RECURSION", "InvalidRecursion"),
    ("42P20", "WINDOWING_ERROR", "WindowingError"),
    ("42P21", "COLLATION_MISMATCH", "CollationMismatch"),
    ("42P22", "INDETERMINATE_COLLATION", "IndeterminateCollation"),

    # Class 44 - WITH CHECK OPTION Violation
    ("44000", "WITH_CHECK_OPTION_VIOLATION", "WithCheckOptionViolation"),

    # Class 53 - Insufficient Resources
    ("53000", "INSUFFICIENT_RESOURCES", "InsufficientResources"),
    ("53100", "DISK_FULL", "DiskFull"),
    ("53200", "OUT_OF_MEMORY", "OutOfMemory"),
    ("53300", "TOO_MANY_CONNECTIONS", "TooManyConnections"),
    ("53400", "CONFIGURATION_LIMIT_EXCEEDED", "ConfigurationLimitExceeded"),

    # Class 54 - Program Limit Exceeded
    ("54000", "PROGRAM_LIMIT_EXCEEDED", "ProgramLimitExceeded"),
    ("54001", "STATEMENT_TOO_COMPLEX", "StatementTooComplex"),
    ("54011", "TOO_MANY_COLUMNS", "TooManyColumns"),
    ("54023", "TOO_MANY_ARGUMENTS", "TooManyArguments"),

    # Class 55 - Object Not In Prerequisite State
    ("55000", "OBJECT_NOT_IN_PREREQUISITE_STATE", "ObjectNotInPrerequisiteState"),
    ("55006", "OBJECT_IN_USE", "ObjectInUse"),
    ("55P02", "CANT_CHANGE_RUNTIME_PARAM", "CantChangeRuntimeParam"),
    ("55P03", "LOCK_NOT_AVAILABLE", "LockNotAvailable"),
    ("55P04", "UNSAFE_NEW_ENUM_VALUE_USAGE", "UnsafeNewEnumValueUsage"),

    # Class 57 - Operator Intervention
    ("57000", "OPERATOR_INTERVENTION", "OperatorIntervention"),
    ("57014", "QUERY_CANCELED", "QueryCanceled"),
    ("57P01", "ADMIN_SHUTDOWN", "AdminShutdown"),
    ("57P02", "CRASH_SHUTDOWN", "CrashShutdown"),
    ("57P03", "CANNOT_CONNECT_NOW", "CannotConnectNow"),
    ("57P04", "DATABASE_DROPPED", "DatabaseDropped"),
    ("57P05", "IDLE_SESSION_TIMEOUT", "IdleSessionTimeout"),

    # Class 58 - System Error
    ("58000", "SYSTEM_ERROR", "SystemError"),
    ("58030", "IO_ERROR", "IoError"),
    ("58P01", "UNDEFINED_FILE", "UndefinedFile"),
    ("58P02", "DUPLICATE_FILE", "DuplicateFile"),

    # Class 72 - Snapshot Failure
    ("72000", "SNAPSHOT_TOO_OLD", "SnapshotTooOld"),

    # Class F0 - Configuration File Error
    ("F0000", "CONFIG_FILE_ERROR", "ConfigFileError"),
    ("F0001", "LOCK_FILE_EXISTS", "LockFileExists"),

    # Class HV - Foreign Data Wrapper Error (SQL/MED)
    ("HV000", "FDW_ERROR", "FdwError"),
    ("HV001", "FDW_OUT_OF_MEMORY", "FdwOutOfMemory"),
    ("HV002", "FDW_DYNAMIC_PARAMETER_VALUE_NEEDED", "FdwDynamicParameterValueNeeded"),
    ("HV004", "FDW_INVALID_DATA_TYPE", "FdwInvalidDataType"),
    ("HV005", "FDW_COLUMN_NAME_NOT_FOUND", "FdwColumnNameNotFound"),
    ("HV006", "FDW_INVALID_DATA_TYPE_DESCRIPTORS", "FdwInvalidDataTypeDescriptors"),
    ("HV007", "FDW_INVALID_COLUMN_NAME", "FdwInvalidColumnName"),
    ("HV008", "FDW_INVALID_COLUMN_NUMBER", "FdwInvalidColumnNumber"),
    ("HV009", "FDW_INVALID_USE_OF_NULL_POINTER", "FdwInvalidUseOfNullPointer"),
    ("HV00A", "FDW_INVALID_STRING_FORMAT", "FdwInvalidStringFormat"),
    ("HV00B", "FDW_INVALID_HANDLE", "FdwInvalidHandle"),
    ("HV00C", "FDW_INVALID_OPTION_INDEX", "FdwInvalidOptionIndex"),
    ("HV00D", "FDW_INVALID_OPTION_NAME", "FdwInvalidOptionName"),
    ("HV00J", "FDW_OPTION_NAME_NOT_FOUND", "FdwOptionNameNotFound"),
    ("HV00K", "FDW_REPLY_HANDLE", "FdwReplyHandle"),
    ("HV00L", "FDW_UNABLE_TO_CREATE_EXECUTION", "FdwUnableToCreateExecution"),
    ("HV00M", "FDW_UNABLE_TO_CREATE_REPLY", "FdwUnableToCreateReply"),
    ("HV00N", "FDW_UNABLE_TO_ESTABLISH_CONNECTION", "FdwUnableToEstablishConnection"),
    ("HV00P", "FDW_NO_SCHEMAS", "FdwNoSchemas"),
    ("HV00Q", "FDW_SCHEMA_NOT_FOUND", "FdwSchemaNotFound"),
    ("HV00R", "FDW_TABLE_NOT_FOUND", "FdwTableNotFound"),
    ("HV010", "FDW_FUNCTION_SEQUENCE_ERROR", "FdwFunctionSequenceError"),
    ("HV014", "FDW_TOO_MANY_HANDLES", "FdwTooManyHandles"),
    ("HV021", "FDW_INCONSISTENT_DESCRIPTOR_INFORMATION", "FdwInconsistentDescriptorInformation"),
    ("HV024", "FDW_INVALID_ATTRIBUTE_VALUE", "FdwInvalidAttributeValue"),
    ("HV090", "FDW_INVALID_STRING_LENGTH_OR_BUFFER_LENGTH", "FdwInvalidStringLengthOrBufferLength"),
    ("HV091", "FDW_INVALID_DESCRIPTOR_FIELD_IDENTIFIER", "FdwInvalidDescriptorFieldIdentifier"),

    # Class P0 - PL/pgSQL Error
    ("P0000", "PLPGSQL_ERROR", "PlpgsqlError"),
    ("P0001", "RAISE_EXCEPTION", "RaiseException"),
    ("P0002", "NO_DATA_FOUND", "NoDataFound"),
    ("P0003", "TOO_MANY_ROWS", "TooManyRows"),
    ("P0004", "ASSERT_FAILURE", "AssertFailure"),

    # Class XX - Internal Error
    ("XX000", "INTERNAL_ERROR", "InternalError"),
    ("XX001", "DATA_CORRUPTED", "DataCorrupted"),
    ("XX002", "INDEX_CORRUPTED", "IndexCorrupted"),
)
