# src/core/charts.py
import io
from typing import Union

import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
import pandas as pd

from src.core.models import PeriodSummary

# Configurações globais para os gráficos
plt.style.use('seaborn-v0_8-darkgrid')
plt.rcParams['font.family'] = 'sans-serif'
plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10

COLORS = {
    'Entrada': '#28a745',  # Verde
    'Saída': '#dc3545',    # Vermelho
    'Diário': '#fd7e14',   # Laranja
    'Saldo': '#007bff',    # Azul
}


def summary_to_dataframe(summary: PeriodSummary) -> pd.DataFrame:
    """Uma linha por dia do período, com os valores em float para o matplotlib."""
    df = pd.DataFrame(
        [
            {
                'Dia': record.day,
                'Entrada': float(record.entrada),
                'Saída': float(record.saida),
                'Diário': float(record.diario),
                'Saldo': float(record.saldo),
            }
            for record in summary.day_records
        ],
        columns=['Dia', 'Entrada', 'Saída', 'Diário', 'Saldo'],
    )
    return df.set_index('Dia')


def generate_month_chart(summary: PeriodSummary) -> Union[io.BytesIO, None]:
    """Gera o gráfico do mês: barras de entrada/saída/diário por dia e a linha do saldo."""
    df = summary_to_dataframe(summary)
    if df.empty or not (df[['Entrada', 'Saída', 'Diário']] != 0).any().any():
        return None

    fig, ax = plt.subplots(figsize=(12, 7))
    df[['Entrada', 'Saída', 'Diário']].plot(
        kind='bar',
        ax=ax,
        color=[COLORS['Entrada'], COLORS['Saída'], COLORS['Diário']],
    )
    # As barras ficam em posições 0..n-1, a linha do saldo precisa usar as mesmas posições
    ax.plot(range(len(df)), df['Saldo'].values, color=COLORS['Saldo'], marker='o', linewidth=2, label='Saldo')

    ax.set_title(f'Movimento diário: {summary.label}', fontsize=16, fontweight='bold')
    ax.set_ylabel('Valor (R$)')
    ax.set_xlabel('Dia')
    ax.yaxis.set_major_formatter(mticker.FormatStrFormatter('R$%.2f'))
    ax.grid(axis='y', linestyle='--', alpha=0.7)
    ax.legend(title='Campo')
    plt.xticks(rotation=0)
    fig.tight_layout()

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=150)
    buf.seek(0)
    plt.close(fig)
    return buf
