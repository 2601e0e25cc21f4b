"""Asynchronous client for a light wallet server."""

from __future__ import annotations

import httpx

from .models import (
    AddressInfo,
    AddressTxs,
    AmountOuts,
    ImportResponse,
    LoginResponse,
    UnspentOuts,
)

_TIMEOUT_SECONDS = 10.0


class LwsRpcClient:
    """Client for the light wallet server REST endpoints.

    Amounts are given in piconero as integers; addresses and view keys as
    their usual string forms.
    """

    def __init__(self, addr, proxy=None):
        self.addr = addr
        self._http = httpx.AsyncClient(timeout=_TIMEOUT_SECONDS, proxy=proxy)

    async def aclose(self):
        await self._http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    async def _request(self, method, params, model):
        response = await self._http.post(f"{self.addr}/{method}", json=params)
        if response.status_code != 200:
            response.raise_for_status()
            raise httpx.HTTPStatusError(
                f"unexpected HTTP status {response.status_code} for url ({response.url})",
                request=response.request,
                response=response,
            )
        return model.from_dict(response.json())

    @staticmethod
    def _account(address, view_key):
        return {"address": str(address), "view_key": str(view_key)}

    async def get_address_info(self, address, view_key):
        return await self._request(
            "get_address_info", self._account(address, view_key), AddressInfo
        )

    async def get_address_txs(self, address, view_key):
        return await self._request(
            "get_address_txs", self._account(address, view_key), AddressTxs
        )

    async def get_random_outs(self, count, amounts):
        params = {"count": count, "amounts": [str(amount) for amount in amounts]}
        return await self._request("get_random_outs", params, AmountOuts)

    async def get_unspent_outs(self, address, view_key, amount, mixin, use_dust, dust_threshold):
        params = {
            **self._account(address, view_key),
            "amount": str(amount),
            "mixin": mixin,
            "use_dust": use_dust,
            "dust_threshold": str(dust_threshold),
        }
        return await self._request("get_unspent_outs", params, UnspentOuts)

    async def import_request(self, address, view_key, from_height=None):
        params = self._account(address, view_key)
        if from_height is not None:
            params["from_height"] = from_height
        return await self._request("import_wallet_request", params, ImportResponse)

    async def login(self, address, view_key, create_account, generated_locally):
        params = {
            **self._account(address, view_key),
            "create_account": create_account,
            "generated_locally": generated_locally,
        }
        return await self._request("login", params, LoginResponse)