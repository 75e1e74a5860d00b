"""Common application components."""
