"""
Deployment Signers
Submits constructor transactions either through a node-managed account
or through a locally held private key
"""

from typing import Optional
from web3 import Web3
from eth_account import Account
from loguru import logger


class NodeAccountSigner:
    """
    Account unlocked on the node (Hardhat, Ganache, anvil)
    The node signs, we only name the sender
    """

    def __init__(self, w3: Web3, address: str):
        self.w3 = w3
        self.address = Web3.to_checksum_address(address)

    def send_deployment(self, constructor) -> bytes:
        """
        Submit a contract constructor call

        Args:
            constructor: web3 ContractConstructor

        Returns:
            Transaction hash
        """
        return constructor.transact({'from': self.address})


class LocalAccountSigner:
    """
    Private key held by this process
    Transactions are signed locally and sent raw
    """

    def __init__(self, w3: Web3, account, chain_id: Optional[int] = None):
        self.w3 = w3
        self.account = account
        self.address = account.address
        self.chain_id = chain_id

    @classmethod
    def from_key(cls, w3: Web3, private_key: str, chain_id: Optional[int] = None):
        return cls(w3, Account.from_key(private_key), chain_id)

    def send_deployment(self, constructor) -> bytes:
        """
        Build, sign and submit a contract constructor call

        Args:
            constructor: web3 ContractConstructor

        Returns:
            Transaction hash
        """
        tx_params = {
            'from': self.address,
            'nonce': self.w3.eth.get_transaction_count(self.address, 'pending'),
        }
        if self.chain_id is not None:
            tx_params['chainId'] = self.chain_id

        # Gas limit and fees are filled in by web3
        transaction = constructor.build_transaction(tx_params)

        logger.debug(f"Signing deployment transaction (nonce {tx_params['nonce']})")
        signed_tx = self.account.sign_transaction(transaction)

        return self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)


def select_signer(
    w3: Web3,
    private_key: Optional[str] = None,
    account_index: int = 0,
    chain_id: Optional[int] = None
):
    """
    Pick the deployer account

    Args:
        w3: Web3 instance
        private_key: Deployer key; wins over node accounts when set
        account_index: Index into the node's accounts otherwise
        chain_id: Chain id to sign for (local keys only)

    Returns:
        NodeAccountSigner or LocalAccountSigner
    """
    if private_key:
        signer = LocalAccountSigner.from_key(w3, private_key, chain_id)
        logger.info(f"Deploying from local account: {signer.address}")
        return signer

    accounts = w3.eth.accounts
    if not accounts:
        raise ValueError(
            "Node exposes no accounts; set the network's private_key_env variable"
        )
    if account_index >= len(accounts):
        raise ValueError(
            f"Account index {account_index} out of range ({len(accounts)} node accounts)"
        )

    signer = NodeAccountSigner(w3, accounts[account_index])
    logger.info(f"Deploying from node account: {signer.address}")
    return signer
