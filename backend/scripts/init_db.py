"""
Script para inicializar o banco de dados.
Cria todas as tabelas e, opcionalmente, lista os contadores de SKU.

Uso:
    python scripts/init_db.py
    python scripts/init_db.py --show-counters
"""
import sys
import os
import argparse

# Adicionar o diretório raiz ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import engine, SessionLocal
from app.models import Base, SequenceCounter


def create_tables():
    """Criar todas as tabelas no banco"""
    print("[*] Criando tabelas...")
    Base.metadata.create_all(bind=engine)
    print("[+] Tabelas criadas com sucesso!")


def show_counters():
    """Listar contadores (somente leitura)"""
    db = SessionLocal()
    try:
        counters = db.query(SequenceCounter).order_by(SequenceCounter.prefix).all()
        if not counters:
            print("[!] Nenhum contador alocado ainda")
            return
        for counter in counters:
            print(f"    {counter.prefix:<20} {counter.last_value}")
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description="Inicializar banco do EMZ Intake")
    parser.add_argument("--show-counters", action="store_true", help="Listar contadores de SKU")
    args = parser.parse_args()

    create_tables()
    if args.show_counters:
        show_counters()


if __name__ == "__main__":
    main()
