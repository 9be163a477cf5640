"""League API: teams, games and the rules that keep them consistent."""
