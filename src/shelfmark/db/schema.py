# ABOUTME: SQL DDL statements for the Shelfmark catalog database schema.
# ABOUTME: Defines objects, collections, library nodes, holdings and site settings.

SCHEMA_V1 = """
-- Catalog objects (one row per item record)
CREATE TABLE objects (
    id          TEXT PRIMARY KEY,
    source_id   TEXT NOT NULL,
    title       TEXT NOT NULL,
    abstract    TEXT,
    year        TEXT,
    versions    TEXT,
    isbns       TEXT,
    date_added  TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

CREATE INDEX idx_objects_source_id ON objects(source_id);

-- Work collections group alternate editions of one work
CREATE TABLE collections (
    id TEXT PRIMARY KEY
);

CREATE TABLE collection_members (
    collection_id TEXT NOT NULL REFERENCES collections(id) ON DELETE CASCADE,
    object_id     TEXT NOT NULL REFERENCES objects(id) ON DELETE CASCADE,
    position      INTEGER NOT NULL,
    PRIMARY KEY (collection_id, object_id)
);

CREATE INDEX idx_collection_members_object ON collection_members(object_id);

-- Library nodes; seq order is creation order, independent of the node id
CREATE TABLE library_nodes (
    seq        INTEGER PRIMARY KEY AUTOINCREMENT,
    id         INTEGER NOT NULL UNIQUE,
    name       TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

-- Reservability per local id
CREATE TABLE holdings (
    local_id   TEXT PRIMARY KEY,
    reservable INTEGER NOT NULL DEFAULT 0
);

-- Site configuration variables
CREATE TABLE settings (
    key   TEXT PRIMARY KEY,
    value TEXT NOT NULL
);

-- Schema versioning
CREATE TABLE schema_version (
    version    INTEGER NOT NULL,
    applied_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%S', 'now'))
);

INSERT INTO schema_version (version) VALUES (1);
"""
