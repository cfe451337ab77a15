"""A multi-token ledger contract with minting, transfers, burning and operator approvals."""