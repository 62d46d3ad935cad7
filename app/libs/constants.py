# Client-facing messages (Bahasa Indonesia)
MESSAGES = {
    "REQUIRED_FIELDS": "Data wajib tidak lengkap",
    "EMAIL_TAKEN": "Email sudah terdaftar",
    "CATEGORY_NOT_FOUND": "Kategori tidak ditemukan",
    "REGISTER_OK": "Registrasi berhasil",
    "REGISTER_FAILED": "Terjadi kesalahan saat mendaftar",
    "LOGIN_REQUIRED_FIELDS": "Email dan password wajib diisi",
    "INVALID_CREDENTIALS": "Email atau password salah",
    "LOGIN_FAILED": "Terjadi kesalahan saat login",
    "SME_NOT_FOUND": "UMKM tidak ditemukan",
    "SME_DELETED": "UMKM berhasil dihapus",
    "PRODUCT_NOT_FOUND": "Produk tidak ditemukan",
    "PRODUCT_DELETED": "Produk berhasil dihapus",
    "SEARCH_FAILED": "Terjadi kesalahan saat mencari UMKM",
    "FILENAME_REQUIRED": "Nama file wajib diisi",
    "FILE_MISSING": "File tidak ditemukan",
    "FILE_TOO_LARGE": "Ukuran file terlalu besar",
    "UPLOAD_FAILED": "Terjadi kesalahan saat mengupload file",
    "INVALID_URL": "URL tidak valid",
    "COORDINATES_NOT_FOUND": "Koordinat tidak ditemukan",
    "RESOLVE_FAILED": "Terjadi kesalahan saat resolve link",
    "UNSUPPORTED_FILE": "Format file tidak didukung",
    "INTERNAL_ERROR": "Internal Server Error",
}
