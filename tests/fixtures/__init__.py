"""
Test Fixtures - Shared Test Data.

Well-known mainnet token addresses used across the test suite.
"""

WETH_ADDRESS = "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"
RDN_ADDRESS = "0x255aa6df07540cb5d3d297f0d0d4d84cb52bc8e6"
GNO_ADDRESS = "0x6810e776880c02933d47db1b9fc05908e5386b96"
