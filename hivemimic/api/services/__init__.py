"""Service handlers answering the node's JSON-RPC methods."""