"""Constants for SignupForm field names"""


class SignupFields:
    """Field name constants for the signup form, in declaration order"""
    FULLNAME = "fullname"
    EMAIL = "email"
    USERNAME = "username"
    PASSWORD = "password"
    CONFIRM = "confirm"
    PHONE = "phone"
    AGE = "age"
    TERMS = "terms"

    # Every field the form renders, in the order errors are reported
    ALL = (FULLNAME, EMAIL, USERNAME, PASSWORD, CONFIRM, PHONE, AGE, TERMS)

    # The endpoint never receives the confirmation field
    SERVER = (FULLNAME, EMAIL, USERNAME, PASSWORD, PHONE, AGE, TERMS)

    # Fields sent by the form controller on submit
    PAYLOAD = (FULLNAME, EMAIL, USERNAME)

    # Values compared verbatim; surrounding whitespace is significant
    UNTRIMMED = (PASSWORD, CONFIRM)

    CHECKBOX = (TERMS,)
