import asyncio

import httpx
import streamlit as st

from frontend.client import API_BASE, get_status, validate_cpf

st.set_page_config(page_title="Validador de CPF", page_icon="🪪", layout="centered")

REASONS = {
    "invalid-format": "Formato inválido: informe 11 dígitos (pontos e hífen são aceitos).",
    "invalid-checksum": "Dígitos verificadores não conferem.",
}

# -------------- UI Sections --------------
st.title("🪪 Validador de CPF")
st.caption("Interface simples em Streamlit para a API de validação")


async def main_ui():
    async with httpx.AsyncClient() as client:
        ok, data, status = await get_status(client)
        if ok:
            st.sidebar.success(f"API disponível em {API_BASE}")
        else:
            st.sidebar.error(f"API indisponível ({status}): {data}")

        tabs = st.tabs(["Validar", "Sobre"])

        # ---- Tab Validar ----
        with tabs[0]:
            cpf = st.text_input("CPF", placeholder="111.444.777-35", key="cpf")
            if st.button("Validar", type="primary"):
                if not cpf or cpf.strip() == "":
                    st.warning("Informe um CPF.")
                else:
                    ok, data, status = await validate_cpf(client, cpf)
                    if not ok:
                        detail = data.get('detail') if isinstance(data, dict) else data
                        st.error(f"Erro ({status}): {detail or data}")
                    elif data.get("valid"):
                        st.success(f"CPF válido: {data.get('formatted')}")
                    else:
                        st.error(REASONS.get(data.get("reason"), f"CPF inválido: {data.get('reason')}"))
                    with st.expander("Resposta da API", expanded=False):
                        st.json(data)

        # ---- Tab Sobre ----
        with tabs[1]:
            st.subheader("Sobre o Projeto")
            st.markdown(
                """
                **Validador de CPF** – Interface de apoio para a API.
                - Remove pontos e hífen antes de validar
                - Confere os dois dígitos verificadores (módulo 11)
                - Vereditos: válido, formato inválido, dígitos inválidos
                """
            )
            st.caption("Construído com Streamlit + httpx (async)")

asyncio.run(main_ui())
