"""
CS Fundamentals content library.

Modules
───────
models       Pydantic record types (TopicContent, CodeExample, Resource, Category)
categorizer  resource link classification by domain and keywords
loader       read topic JSON documents into a Catalog (ContentError on bad content)
catalog      id-keyed lookup, category index, static bundle export
links        deduplicate / group / prioritise a topic's links
outline      split an explanation into heading / list / paragraph blocks
audit        content-quality checks over a loaded catalog
store        SQLite snapshot of the corpus
cli          `cs-fundamentals` command
"""

__version__ = "1.0.0"
