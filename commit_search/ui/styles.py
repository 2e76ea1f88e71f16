"""CSS styles for the commit search TUI."""

APP_CSS = """
Screen {
    layout: horizontal;
}

#left-container {
    width: 60%;
    height: 100%;
    border: solid $primary;
}

#repository-container {
    width: 100%;
    height: 100%;
    border: solid $accent;
}

#detail-container {
    width: 40%;
    height: 100%;
    border: solid $secondary;
    padding: 1;
}

#results-list, #repository-list {
    height: 1fr;
}

.list-header {
    height: auto;
    background: $surface;
    padding: 0 1;
    text-style: bold;
    color: $primary;
}

#detail-panel {
    height: 100%;
    overflow-y: auto;
    scrollbar-gutter: stable;
}

#detail-panel:focus {
    border: solid $success;
}

CommitItem, CommandItem, RepositoryItem {
    height: 1;
    padding: 0 1;
}

CommandItem {
    background: $boost;
}

CommitItem:hover, CommandItem:hover, RepositoryItem:hover {
    background: $surface-lighten-1;
}

ListView:focus > ListItem.-active {
    background: $primary-darken-1;
}

ListView.-has-focus > ListItem.-active {
    background: $primary;
}

Footer {
    background: $surface;
}
"""
