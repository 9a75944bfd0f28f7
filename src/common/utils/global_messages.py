class GlobalMessages:
    # Request Messages
    METHOD_NOT_ALLOWED = "Method not allowed"
    REQUIRED_FIELDS_MISSING = "Name, email, and message are required"

    # Configuration Messages
    MISSING_API_KEY = "Email service not configured - missing API key"
    MISSING_FROM_EMAIL = "Email service not configured - missing from email"
    MISSING_TO_EMAIL = "Email service not configured - missing to email"
    ENV_VAR_NOT_SET = "{name} environment variable not set"

    # Inquiry Messages
    INQUIRY_SUBMITTED = "Contact form submitted successfully"
    INQUIRY_FAILED = "Failed to submit contact form. Please try again."
