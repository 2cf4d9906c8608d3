"""AmarChess: negamax alpha-beta move selection over python-chess positions."""
