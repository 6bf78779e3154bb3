"""MongoDB client, database, collection and settings plugins."""