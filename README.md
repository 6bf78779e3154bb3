# hivemimic

A stand-in for a Hive blockchain node, meant for end-to-end tests of software
that talks to Hive. It serves a JSON-RPC 2.0 endpoint that answers a subset of
the node API with fixed or file-backed mock data, and opens its own database in
MongoDB.

## Running

Installing the package provides the `hivemimic` command:

    hivemimic
    hivemimic --port 8080

On start it:

1. Reads its database settings from `data/config/DbConfigData.json`, creating
   that file on first run. The connection string defaults to the `MONGO_URL`
   environment variable, or `mongodb://localhost:27017` if it is unset; when
   `MONGO_URL` is set it also overwrites the stored value.
2. Connects to MongoDB and pings it, then opens the `go-mimic` database with its
   `blocks` and `state` collections. If this fails, the error is logged and the
   API is served anyway.
3. Serves JSON-RPC on the given port (3000 by default) until interrupted.

## Endpoints

- `GET /` – a short plain-text banner naming the service.
- `GET /health` – an empty `200` response.
- `POST /` – JSON-RPC 2.0 calls.

A request body looks like this:

    {"jsonrpc": "2.0", "method": "condenser_api.get_dynamic_global_properties", "params": [], "id": 1}

and the reply echoes the `id`:

    {"id": 1, "jsonrpc": "2.0", "result": {...}}

Errors are answered with a plain-text body:

- `400 invalid request` – the body is not a JSON object;
- `400 invalid method` – there is no string `method`;
- `404 method not found` – the method is not registered;
- `400 failed to decode params` – `params` do not have the shape the method expects;
- `500 internal server error` – the method failed otherwise (for example a
  missing mock data file).

Other paths give `404`, other HTTP verbs on a known path give `405`.

## Supported methods

| Service               | Method | Answer |
|-----------------------|--------|--------|
| `condenser_api`       | `get_block` | `{"sum": a + b + 1, "product": a * b}` for params `{"a": .., "b": ..}` |
|                       | `get_accounts` | records from the accounts mock file for the first name of each inner list; unknown names are skipped, `null` if none are found |
|                       | `get_dynamic_global_properties` | fixed global properties (head block 100) |
|                       | `get_current_median_history_price` | `{"base": "100.000 SBD", "quote": "100.000 HIVE"}` |
|                       | `get_reward_fund` | a fixed reward fund named `test` |
|                       | `get_withdraw_routes`, `get_open_orders` | always `null` |
|                       | `get_conversion_requests`, `get_collateralized_conversion_requests`, `list_proposals` | always `[]` |
| `block_api`           | `get_block` | `{"block": ...}` for `block_num`; an empty block if unknown |
|                       | `get_block_range` | the known blocks from `starting_block_num` to `starting_block_num + count` inclusive, `null` if none |
| `rc_api`              | `find_rc_accounts` | a full resource-credit record for each name in `accounts` |
| `account_history_api` | `get_ops_in_block` | `{"blocks": null}` |

`block_api` reads blocks from `mockdata/block_api.get_block.mock.json`, an
object keyed by block number whose entries hold a `block` object.
`condenser_api.get_accounts` reads accounts from
`mockdata/condenser_api_get_accounts.mock.json`, an object keyed by account
name. Both paths are relative to the working directory and are read on every
call; `BlockApi(mock_path)` and `Condenser(accounts_mock_path)` take other paths.

## Using it from Python

`ApiServer.handle(method, path, body)` answers a single request without a
socket and returns a `Response` with `status`, `body`, `headers`, `text` and
`json()`:

    from hivemimic.api.server import ApiServer

    server = ApiServer()
    server.init()
    server.register_default_services()

    reply = server.handle(
        "POST", "/", b'{"method": "condenser_api.get_reward_fund", "params": [], "id": 1}'
    )
    assert reply.status == 200
    assert reply.json()["result"]["name"] == "test"

`ApiServer.make_server(host, port)` returns a `ThreadingHTTPServer` you can run
in a thread of your own, and `ApiServer.start(port)` registers the default
services and serves until interrupted.

Your own services subclass `ServiceHandler` from
`hivemimic.api.services.base`, call `register(alias, method_name)` in `expose`
for each method they offer, and are added with
`ApiServer.register_service(service, name)`. A method takes the request's
`params` and returns the result; raising `ValueError` gives a `400` reply.

Components with a lifecycle (`Db`, `DbInstance`, `MimicDb`, `Collection`,
`Blocks`, `StateDb`, `Config`, `DbConfig`) implement `Plugin` from
`hivemimic.aggregate` (`init`, `start`, `stop`) and can be grouped in an
`Aggregate`, which initialises them in order, starts them together (its
`start()` returns a future of all their results) and stops them in order.

`Blocks` stores `HiveBlock` records by height: `insert_block(block)` upserts,
and `get_block_by_height(height)` returns a block or raises
`BlockNotFoundError`.

The `hivemimic.utils` modules hold small helpers: `require_env` and
`env_or_default` for environment variables, `sleep`, `resolved` and `rejected`
for futures, and list helpers such as `index_of`, `remove` and `merge_sort`.

## What it does not do

- The RPC methods do not read from or write to MongoDB; answers come only from
  fixed values and the mock files.
- `StateDb` opens the `state` collection but offers no operations on it, and
  `Blocks` has no lookup by block id or by height range.
- No transactions are accepted, checked or signed, and no blocks are produced.