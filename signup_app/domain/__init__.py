"""Domain layer: signup field constants, models and the validation rule table."""
