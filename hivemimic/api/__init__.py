"""JSON-RPC HTTP server exposing the simulated node's API."""