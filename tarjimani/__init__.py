"""
Tarjimani: interactive dictionary-lookup tool.

Vocabulary is a bidirectional mapping between words of different languages
stored in a flat text file.  Unknown words are added by the user and written
back to the file.
"""
