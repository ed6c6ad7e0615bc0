"""xcodesnippet - manage Xcode code snippets from plain source files."""
