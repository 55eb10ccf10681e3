"""Poll syndication feeds and publish newly published entries."""
