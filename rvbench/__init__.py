"""Reference models of benchmark kernels and datasets, a CRC-32 checksum and semihosting call structures."""

__version__ = "1.0.0"
__all__ = ["checksum", "semihosting", "kernels", "vvadd_data", "sgemm_data"]