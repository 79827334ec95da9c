"""Host adapters for the input widget."""
