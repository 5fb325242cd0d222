class AppStatusCode:
    # success
    DATA_RETRIEVED_SUCCESSFULLY = "200"

    # generic failures
    OPERATION_FAILED = "100"
    OPERATION_ERROR = "101"
    INVALID_INPUT = "102"

    # data
    DATA_NOT_FOUND = "110"
    CONSISTENCY_VIOLATION = "111"
    STORE_FAILURE = "112"

    # authentication
    AUTHENTICATION_TOKEN_INVALID = "120"
    AUTHENTICATION_TOKEN_EXPIRED = "121"
    AUTHENTICATION_ROLE_MISSING = "123"
    AUTHENTICATION_UNAUTHORIZED_ACCESS = "124"
