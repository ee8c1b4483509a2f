"""User-facing messages shared by several commands."""

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSON_NOT_IN_ADDRESSBOOK = "Person could not be found in address book"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"
MESSAGE_WELCOME = "Welcome to your Address Book!"
MESSAGE_GOODBYE = "Good bye!"
MESSAGE_USING_STORAGE_FILE = "Using storage file : {}"


def invalid_command_format(usage: str) -> str:
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage)


def persons_listed_overview(count: int) -> str:
    return MESSAGE_PERSONS_LISTED_OVERVIEW.format(count)
