"""Route modules of the portfolio web app."""
