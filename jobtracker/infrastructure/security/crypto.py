"""
Crypto Service - Session token encryption using Fernet.

Provides symmetric encryption for keeping the bearer token on disk.
"""

from pathlib import Path
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken


class CryptoService:
    """
    Cryptographic service for persisted secrets.

    Uses Fernet symmetric encryption from the cryptography library.
    The encryption key is stored locally in a separate file.
    """

    def __init__(self, key_path: Path) -> None:
        """
        Initialize the crypto service.

        Args:
            key_path: Path to store/load the encryption key.
        """
        self.key_path = key_path
        self._fernet: Optional[Fernet] = None

    def initialize(self) -> None:
        """Initialize or load the encryption key."""
        if self.key_path.exists():
            key = self.key_path.read_bytes()
        else:
            key = Fernet.generate_key()
            self.key_path.parent.mkdir(parents=True, exist_ok=True)
            self.key_path.write_bytes(key)
            try:
                self.key_path.chmod(0o600)
            except OSError:
                pass  # Windows doesn't support chmod

        self._fernet = Fernet(key)

    @property
    def fernet(self) -> Fernet:
        """Get the Fernet instance."""
        if not self._fernet:
            raise RuntimeError("CryptoService not initialized. Call initialize() first.")
        return self._fernet

    def encrypt(self, data: str) -> str:
        """
        Encrypt a string.

        Returns:
            Base64-encoded encrypted string.
        """
        return self.fernet.encrypt(data.encode("utf-8")).decode("utf-8")

    def decrypt(self, encrypted_data: str) -> str:
        """
        Decrypt a string.

        Raises:
            InvalidToken: If decryption fails (wrong key or corrupted data).
        """
        return self.fernet.decrypt(encrypted_data.encode("utf-8")).decode("utf-8")

    def try_decrypt(self, encrypted_data: str) -> Optional[str]:
        """Decrypt a string, returning None when the key or data is wrong."""
        try:
            return self.decrypt(encrypted_data)
        except InvalidToken:
            return None
