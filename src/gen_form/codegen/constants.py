"""
Constants for the code emitters.

Fixed literals of the generated component live here so the emitters,
the dialect rewrite and the output guardrail agree on them.
"""

import re

# Name of the zod schema constant in the generated module
SCHEMA_NAME = "formSchema"

# Inferred form value type used by the typed dialect
INFERRED_TYPE = f"z.infer<typeof {SCHEMA_NAME}>"

# The two annotation forms the untyped dialect strips:
#   function onSubmit(values: z.infer<typeof formSchema>)
#   useForm<z.infer<typeof formSchema>>(...)
VALUE_ANNOTATION = f": {INFERRED_TYPE}"
TYPE_ARGUMENT = f"<{INFERRED_TYPE}>"

TYPE_ANNOTATION_PATTERNS = [
    re.compile(re.escape(VALUE_ANNOTATION)),
    re.compile(re.escape(TYPE_ARGUMENT)),
]

# Required-field message appended to string rules
REQUIRED_MESSAGE_TEMPLATE = "{label} is required"

# Widget literals
DISABLED_CONDITION = "form.formState.isSubmitting || {disabled}"
SELECT_PLACEHOLDER = "Select an option"
DATE_PLACEHOLDER = "Pick a date"
DATE_DISPLAY_FORMAT = "PPP"
DATE_FLOOR = "1900-01-01"

SUBMIT_HANDLER_COMMENT = "// Handle form submission here"
