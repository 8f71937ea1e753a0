"""Show the next public holidays for a country."""
