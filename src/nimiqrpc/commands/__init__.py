"""
Commands - CLI sub-commands for the Nimiq RPC client.

Each module groups the commands of one area of the node API:
- accounts:     Wallet accounts and balances
- blocks:       Block lookups and transaction counts
- transactions: Creating, sending and looking up transactions
- mining:       Block templates, work and mining status
- node:         Consensus, sync, mempool, logging and peers
"""
