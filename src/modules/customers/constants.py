"""Customer field constraints shared by models and DTOs."""

CPF_LENGTH = 11
NAME_MAX_LENGTH = 100
