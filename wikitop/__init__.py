"""Wikipedia 閲覧数ランキング CLI."""
