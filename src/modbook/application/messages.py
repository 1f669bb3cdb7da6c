"""User-facing message templates and usage strings."""

PREFIX_MODULE_CODE = "m/"
PREFIX_TAG = "t/"

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n%s"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_INVALID_RANGE = "The range of indexes provided is invalid"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."

# --- delete ---

MESSAGE_DELETE_USAGE = (
    "delete: Deletes the person identified by the index number used in the "
    "displayed person list or by module code.\n"
    f"Parameters: INDEX (must be a positive integer) or {PREFIX_MODULE_CODE}MODULE CODE\n"
    f"Example: delete 1 , delete 1-3 , delete {PREFIX_MODULE_CODE}CS2040S"
)
MESSAGE_DELETE_BY_MODULE_USAGE = (
    "delete: Delete only accepts 1 batch delete by Module Code\n"
    f"Example: delete {PREFIX_MODULE_CODE}CS2040S"
)
MESSAGE_NUMBER_DELETED_PERSON = "%d Deleted Persons: \n"
MESSAGE_NUMBER_EDITED_PERSON = "%d Edited Persons: \n"
MESSAGE_DELETE_SUCCESS = "%s \n"
MESSAGE_NO_SUCH_MODULE_CODE = "No such existing Module Code"
MESSAGE_EDIT_WOULD_DUPLICATE = (
    "Removing module code %s would make %s identical to an existing person"
)

# --- list / filter ---

MESSAGE_LIST_USAGE = "list: Lists all persons.\nExample: list"
MESSAGE_LIST_SUCCESS = "Listed all persons"

MESSAGE_FILTER_USAGE = (
    "filter: Lists persons carrying all the given tags and any of the given "
    "module codes.\n"
    f"Parameters: [{PREFIX_TAG}TAG]... [{PREFIX_MODULE_CODE}MODULE CODE]...\n"
    f"Example: filter {PREFIX_TAG}friends {PREFIX_MODULE_CODE}CS2040S"
)
MESSAGE_PERSONS_LISTED_OVERVIEW = "%d persons listed!"

MESSAGE_HELP = "Commands: delete, list, filter"
