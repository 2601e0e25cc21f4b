# lwsclient

An asynchronous Python client for the REST API of a Monero light wallet
server. Every endpoint is one coroutine method on `LwsRpcClient`. Each method
posts a JSON object to `<addr>/<endpoint>` and returns a model built from the
server's JSON reply.

## Installation

```
pip install lwsclient
```

To install the test dependencies as well:

```
pip install "lwsclient[test]"
```

## Usage

```python
import asyncio

from lwsclient.client import LwsRpcClient


async def main():
    address = "4..."       # the wallet's primary address
    view_key = "0123..."   # the wallet's private view key, as hex

    async with LwsRpcClient("http://localhost:38884", None) as client:
        login = await client.login(address, view_key, True, True)
        print("new address:", login.new_address)

        await client.import_request(address, view_key, None)

        info = await client.get_address_info(address, view_key)
        print("scanned height:", info.scanned_height)

        txs = await client.get_address_txs(address, view_key)
        for tx in txs.transactions:
            print(tx.hash, tx.total_received)

        outs = await client.get_random_outs(11, [1_000_000])
        unspent = await client.get_unspent_outs(
            address, view_key, 1000, 10, True, 100
        )
        print(len(outs.amount_outs), unspent.amount)


asyncio.run(main())
```

The methods and the endpoints they call:

| Method | Endpoint | Returns |
| --- | --- | --- |
| `login(address, view_key, create_account, generated_locally)` | `login` | `LoginResponse` |
| `import_request(address, view_key, from_height=None)` | `import_wallet_request` | `ImportResponse` |
| `get_address_info(address, view_key)` | `get_address_info` | `AddressInfo` |
| `get_address_txs(address, view_key)` | `get_address_txs` | `AddressTxs` |
| `get_random_outs(count, amounts)` | `get_random_outs` | `AmountOuts` |
| `get_unspent_outs(address, view_key, amount, mixin, use_dust, dust_threshold)` | `get_unspent_outs` | `UnspentOuts` |

`import_request` sends `from_height` only when it is not `None`.

The second argument to `LwsRpcClient` is an optional proxy URL, for example
`"socks5://localhost:9050"` (SOCKS support needs httpx's `socks` extra). Pass
`None` for a direct connection. Each request times out after 10 seconds. Use
the client as an `async with` block, or call `await client.aclose()` when done.

Amounts are whole piconero integers. The client sends them as decimal strings,
which is the form the server expects. Addresses and view keys are sent as
`str(value)`; the client does not check them.

### Errors

If the server answers with a status other than 200, the method raises
`httpx.HTTPStatusError`. If a reply is not valid JSON, or a field is missing
or of the wrong type or range, the method raises `ValueError`. If the reply is
not a JSON object at all, it raises `TypeError`.

### Models

The models live in `lwsclient.models`:

- `AddressInfo`
- `AddressTxs`
- `Transaction`
- `SpendObject`
- `Rates` (its `AUD` field is held as `aud`)
- `AmountOuts`
- `RandomOutput`
- `RandomOutputs`
- `UnspentOuts`
- `Output`
- `ImportResponse`
- `LoginResponse`

Each model has `from_dict` and `to_dict` methods.

Flag fields such as `LoginResponse.new_address` accept either a JSON boolean or
the integers `0` and `1`, since older servers send integers; the helper doing
this is `number_or_boolean`. The `transactions` list of `AddressTxs` and the
`spent_outputs` list of `Transaction` default to empty when absent.

The module also has `BlockHash` (a 32-byte hash), the `Status` enum and
`unwrap_ok`, which checks that a `status`-tagged object says `"OK"` and
returns the rest of it.

Hashes and keys are held as `lwsclient.util.HashString` values, built with
`HashString.from_hex(value, size)`. A `HashString` keeps its bytes in `raw`
and prints as lower-case hex. `parse_hex(value, size)` decodes hex and, when
`size` is given, requires exactly that many bytes.

## What this package does not do

It is a client library only: there is no command-line tool and no server. It
does not build or sign transactions, and it does not derive or validate Monero
addresses or keys.