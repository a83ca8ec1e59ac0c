"""Generator for WinSW service descriptors and wrapper executables."""
