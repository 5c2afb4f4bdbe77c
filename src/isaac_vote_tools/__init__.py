# ABOUTME: Companion scripts for the Isaac item vote site
# ABOUTME: Vote flood against the vote API and item catalogue scraping from the Isaac wiki

__version__ = "0.1.0"
